from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.attendance.draft import AttendanceDraftManager
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry, ServerReport
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.students.model import Student


class InMemoryAttendance:
    """Stands in for the backend attendance endpoints."""

    def __init__(self, days: Optional[dict[date, list[AttendanceEntry]]] = None):
        self.days: dict[date, list[AttendanceEntry]] = days or {}
        self.saved: list[tuple[date, tuple[AttendanceEntry, ...]]] = []
        self.get_calls: list[date] = []
        self.get_error: Optional[Exception] = None
        self.save_error: Optional[Exception] = None
        self.during_save = None

    def get_daily(self, work_date: date):
        self.get_calls.append(work_date)
        if self.get_error:
            raise self.get_error
        return list(self.days.get(work_date, []))

    def save_daily(self, work_date: date, entries):
        if self.during_save:
            self.during_save()
        if self.save_error:
            raise self.save_error
        self.saved.append((work_date, tuple(entries)))
        self.days[work_date] = list(entries)

    def get_report(self, work_date: date) -> ServerReport:
        entries = self.days.get(work_date, [])
        present = sum(1 for e in entries if e.status == AttendanceStatus.PRESENT)
        absent = sum(1 for e in entries if e.status == AttendanceStatus.ABSENT)
        total = len(entries)
        return ServerReport(
            total_students=total,
            present_count=present,
            absent_count=absent,
            attendance_rate=present * 100.0 / total if total else 0.0,
        )


class InMemoryStudents:
    def __init__(self, attendance: InMemoryAttendance, roster_dates: list[date]):
        self._attendance = attendance
        self._roster_dates = roster_dates
        self._next_id = 100
        self.added: list[Student] = []
        self.error: Optional[Exception] = None

    def add_student(self, name: str) -> Student:
        if self.error:
            raise self.error
        student = Student(student_id=self._next_id, name=name)
        self._next_id += 1
        self.added.append(student)
        for d in self._roster_dates:
            self._attendance.days.setdefault(d, []).append(AttendanceEntry(student.student_id, student.name))
        return student


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 5)


@pytest.fixture
def roster(fixed_today):
    return {
        fixed_today: [
            AttendanceEntry(1, "Ann", AttendanceStatus.PRESENT),
            AttendanceEntry(2, "Bo", AttendanceStatus.ABSENT),
            AttendanceEntry(3, "Cy", None),
        ],
        date(2024, 1, 4): [
            AttendanceEntry(1, "Ann", AttendanceStatus.ABSENT),
            AttendanceEntry(2, "Bo", AttendanceStatus.ABSENT),
        ],
    }


@pytest.fixture
def attendance_repo(roster) -> InMemoryAttendance:
    return InMemoryAttendance(roster)


@pytest.fixture
def draft(attendance_repo) -> AttendanceDraftManager:
    return AttendanceDraftManager(attendance_repo, grace_seconds=0)


@pytest.fixture
def students_repo(attendance_repo, fixed_today) -> InMemoryStudents:
    return InMemoryStudents(attendance_repo, [fixed_today])


@pytest.fixture
def app(monkeypatch, attendance_repo, students_repo, fixed_today):
    from src.attendance_tracker.attendance_tracker.attendance import draft as draft_module
    from src.attendance_tracker.attendance_tracker.container import build_container
    from src.attendance_tracker.attendance_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(draft_module, "today_local", lambda: fixed_today)

    container = build_container(
        api_config={"base_url": "http://backend.test/api"},
        grace_seconds=0,
        attendance_gateway=attendance_repo,
        student_gateway=students_repo,
    )
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
