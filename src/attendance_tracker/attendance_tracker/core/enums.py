from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status a student can be marked with for a day."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        return cls(str(value).strip().upper())


class NoticeLevel(str, Enum):
    """Notice severity; values double as Flask flash categories."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "danger"
