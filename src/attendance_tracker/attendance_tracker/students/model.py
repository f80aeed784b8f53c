from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student as assigned by the backend.

    Note: Immutable on the client; only the backend creates ids.
    """

    student_id: int
    name: str
