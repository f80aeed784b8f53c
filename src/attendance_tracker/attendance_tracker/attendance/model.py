from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..notifications.model import Notice


@dataclass(frozen=True)
class AttendanceEntry:
    """One roster row of the draft: a student and the status chosen so far.

    ``status is None`` means nothing has been chosen yet for the active date.
    """

    student_id: int
    name: str
    status: Optional[AttendanceStatus] = None

    @property
    def is_marked(self) -> bool:
        return self.status is not None

    def with_status(self, status: AttendanceStatus) -> "AttendanceEntry":
        return replace(self, status=status)


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int
    unmarked: int
    rate: float

    @property
    def rate_label(self) -> str:
        return f"{self.rate:.1f}%"


@dataclass(frozen=True)
class DraftSnapshot:
    """Immutable view of a draft handed to the render surface."""

    active_date: Optional[date]
    entries: tuple[AttendanceEntry, ...]
    dirty: bool
    summary: AttendanceSummary
    saving: bool = False


@dataclass(frozen=True)
class DraftResult:
    snapshot: DraftSnapshot
    notice: Optional[Notice] = None


@dataclass(frozen=True)
class ExportRow:
    student_id: int
    name: str
    status: str
    work_date: Optional[date]


@dataclass(frozen=True)
class ServerReport:
    """Read-model of what the backend has saved for a day."""

    total_students: int
    present_count: int
    absent_count: int
    attendance_rate: float

    @property
    def rate_label(self) -> str:
        return f"{self.attendance_rate:.1f}%"
