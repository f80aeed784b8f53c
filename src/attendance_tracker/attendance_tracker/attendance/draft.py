from __future__ import annotations

import logging
import threading
import time
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_iso_date, shift_date, today_local
from ..core.constants import DEFAULT_SUBMIT_GRACE_SECONDS, UNMARKED_STUDENTS_MESSAGE
from ..core.enums import AttendanceStatus
from ..core.exceptions import GatewayError, ValidationError
from ..notifications.model import Notice
from .gateway import AttendanceGateway
from .model import AttendanceEntry, DraftResult, DraftSnapshot, ExportRow
from .summary import summarize

logger = logging.getLogger(__name__)


class AttendanceDraftManager:
    """Client-side staging area for one day's attendance.

    The buffer is loaded from the backend, edited locally and sent back as a
    single batch on ``commit``. Every operation returns a ``DraftResult`` with
    an immutable snapshot for rendering.

    Backend calls run outside the lock so edits stay possible while a save is
    outstanding; ``commit`` always sends the entries captured when it was
    invoked.
    """

    def __init__(
        self,
        attendance: AttendanceGateway,
        *,
        grace_seconds: float = DEFAULT_SUBMIT_GRACE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._attendance = attendance
        self._grace_seconds = float(grace_seconds)
        self._clock = clock
        self._lock = threading.RLock()

        self._active_date: Optional[date] = None
        self._entries: tuple[AttendanceEntry, ...] = ()
        self._dirty = False
        # Bumped on every local edit; tells commit whether edits raced the save.
        self._revision = 0
        # Bumped on every load request; only the latest load may apply.
        self._load_seq = 0

        self._commit_in_flight = False
        self._commit_settled_at: Optional[float] = None

    @property
    def active_date(self) -> Optional[date]:
        return self._active_date

    @property
    def dirty(self) -> bool:
        return self._dirty

    def snapshot(self) -> DraftSnapshot:
        with self._lock:
            return DraftSnapshot(
                active_date=self._active_date,
                entries=self._entries,
                dirty=self._dirty,
                summary=summarize(self._entries),
                saving=self._commit_in_flight,
            )

    def summary(self):
        return self.snapshot().summary

    def load(self, work_date: date) -> DraftResult:
        """Replace the buffer with the backend's roster for ``work_date``.

        On failure the previous buffer (and date) stay as they were.
        """

        with self._lock:
            self._load_seq += 1
            seq = self._load_seq

        try:
            entries = tuple(self._attendance.get_daily(work_date))
        except GatewayError as e:
            logger.warning("Loading attendance for %s failed: %s", format_iso_date(work_date), e)
            return DraftResult(self.snapshot(), Notice.error(str(e)))

        with self._lock:
            if seq != self._load_seq:
                logger.info("Dropping stale roster for %s", format_iso_date(work_date))
                return DraftResult(self.snapshot())
            self._active_date = work_date
            self._entries = entries
            self._dirty = False
        return DraftResult(self.snapshot())

    def reload(self) -> DraftResult:
        return self.load(self._active_date or today_local())

    def go_today(self) -> DraftResult:
        return self.load(today_local())

    def shift_day(self, days: int) -> DraftResult:
        return self.load(shift_date(self._active_date or today_local(), days))

    def set_status(self, student_id: int, status: AttendanceStatus) -> DraftResult:
        with self._lock:
            for i, entry in enumerate(self._entries):
                if entry.student_id == student_id:
                    break
            else:
                return DraftResult(self.snapshot())

            entries = list(self._entries)
            entries[i] = entry.with_status(status)
            self._entries = tuple(entries)
            self._dirty = True
            self._revision += 1
            return DraftResult(self.snapshot())

    def set_all_status(self, status: AttendanceStatus, *, confirmed: bool = False) -> DraftResult:
        """Overwrite every entry's status. The caller must have asked the user."""

        if not confirmed:
            raise ValidationError(f"Please confirm marking all students as {status.value}")
        if self._active_date is None:
            raise ValidationError("No attendance day is loaded")

        with self._lock:
            self._entries = tuple(e.with_status(status) for e in self._entries)
            self._dirty = True
            self._revision += 1
            count = len(self._entries)
        return DraftResult(self.snapshot(), Notice.success(f"All {count} students marked as {status.value}"))

    def commit(self) -> DraftResult:
        with self._lock:
            if not self._dirty:
                return DraftResult(self.snapshot(), Notice.info("No changes to save"))
            if self._submit_blocked():
                return DraftResult(self.snapshot(), Notice.info("Attendance is already being saved"))

            unmarked = sum(1 for e in self._entries if not e.is_marked)
            if unmarked:
                raise ValidationError(f"{UNMARKED_STUDENTS_MESSAGE} ({unmarked})")

            work_date = self._active_date
            captured = self._entries
            revision = self._revision
            self._commit_in_flight = True

        try:
            self._attendance.save_daily(work_date, captured)
        except GatewayError as e:
            logger.warning("Saving attendance for %s failed: %s", format_iso_date(work_date), e)
            self._settle()
            return DraftResult(self.snapshot(), Notice.error(str(e)))

        self._settle()
        saved = f"Attendance saved for {format_iso_date(work_date)}"

        with self._lock:
            if self._active_date != work_date:
                logger.info("Save for %s settled after date changed; not applied", format_iso_date(work_date))
                return DraftResult(self.snapshot(), Notice.success(saved))
            if self._revision != revision:
                return DraftResult(
                    self.snapshot(),
                    Notice.warning(f"{saved}; changes made while saving are not saved yet"),
                )
            self._dirty = False

        reloaded = self.load(work_date)
        if reloaded.notice is not None:
            return DraftResult(reloaded.snapshot, Notice.warning(f"{saved}, but reloading failed: {reloaded.notice.message}"))
        return DraftResult(reloaded.snapshot, Notice.success(saved))

    def filter(self, query: str | None) -> tuple[AttendanceEntry, ...]:
        entries = self._entries
        needle = (query or "").strip().lower()
        if not needle:
            return entries
        return tuple(e for e in entries if needle in e.name.lower() or needle in str(e.student_id))

    def export_snapshot(self) -> Sequence[ExportRow]:
        with self._lock:
            work_date = self._active_date
            entries = self._entries
        return [
            ExportRow(
                student_id=e.student_id,
                name=e.name,
                status=e.status.value if e.status else "",
                work_date=work_date,
            )
            for e in entries
        ]

    def _submit_blocked(self) -> bool:
        if self._commit_in_flight:
            return True
        if self._commit_settled_at is None:
            return False
        return self._clock() - self._commit_settled_at < self._grace_seconds

    def _settle(self) -> None:
        with self._lock:
            self._commit_in_flight = False
            self._commit_settled_at = self._clock()
