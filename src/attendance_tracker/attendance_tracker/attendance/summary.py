from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, AttendanceSummary


def summarize(entries: Iterable[AttendanceEntry]) -> AttendanceSummary:
    total = present = absent = 0
    for e in entries:
        total += 1
        if e.status == AttendanceStatus.PRESENT:
            present += 1
        elif e.status == AttendanceStatus.ABSENT:
            absent += 1

    rate = round(present * 100.0 / total, 1) if total else 0.0
    return AttendanceSummary(
        total=total,
        present=present,
        absent=absent,
        unmarked=total - present - absent,
        rate=rate,
    )
