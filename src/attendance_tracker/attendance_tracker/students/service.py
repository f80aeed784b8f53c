from __future__ import annotations

from ..common.validators import require_non_empty
from .gateway import StudentGateway
from .model import Student


class StudentService:
    """Use case: add a student (pass-through to the backend)."""

    def __init__(self, students: StudentGateway):
        self._students = students

    def add_student(self, name: str) -> Student:
        name = require_non_empty(name, "Please enter a student name")
        return self._students.add_student(name)
