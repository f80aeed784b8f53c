from __future__ import annotations

from typing import Protocol

from .model import Student


class StudentGateway(Protocol):
    def add_student(self, name: str) -> Student:
        raise NotImplementedError
