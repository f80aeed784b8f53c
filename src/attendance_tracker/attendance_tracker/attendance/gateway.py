from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEntry, ServerReport


class AttendanceGateway(Protocol):
    def get_daily(self, work_date: date) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def save_daily(self, work_date: date, entries: Sequence[AttendanceEntry]) -> None:
        """Persist a whole day in one request; every entry must be marked."""

        raise NotImplementedError

    def get_report(self, work_date: date) -> ServerReport:
        raise NotImplementedError
