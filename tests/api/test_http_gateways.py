from __future__ import annotations

import json
from datetime import date

import pytest
import requests

from src.attendance_tracker.attendance_tracker.api.connection import ApiConfig, ApiConnection
from src.attendance_tracker.attendance_tracker.attendance.http_attendance_gateway import HttpAttendanceGateway
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry
from src.attendance_tracker.attendance_tracker.core.constants import TRANSPORT_ERROR_MESSAGE
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import ServerRejection, TransportError
from src.attendance_tracker.attendance_tracker.students.http_student_gateway import HttpStudentGateway


def make_response(status_code: int, body=None, *, raw: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://backend.test/api"
    response.encoding = "utf-8"
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, *, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def make_conn(session: FakeSession) -> ApiConnection:
    return ApiConnection(ApiConfig(base_url="http://backend.test/api/", timeout=3), session=session)


def test_get_daily_maps_rows_and_null_status():
    session = FakeSession(make_response(200, [{"id": 1, "name": "Ann", "status": "PRESENT"}, {"id": 2, "name": "Bo", "status": None}]))
    gateway = HttpAttendanceGateway(make_conn(session))

    entries = gateway.get_daily(date(2024, 1, 5))

    assert entries == [
        AttendanceEntry(1, "Ann", AttendanceStatus.PRESENT),
        AttendanceEntry(2, "Bo", None),
    ]
    call = session.calls[0]
    assert call["url"] == "http://backend.test/api/attendance/daily"
    assert call["params"] == {"date": "2024-01-05"}
    assert call["timeout"] == 3


def test_save_daily_posts_whole_day():
    session = FakeSession(make_response(201, raw=b""))
    gateway = HttpAttendanceGateway(make_conn(session))

    gateway.save_daily(
        date(2024, 1, 5),
        [AttendanceEntry(1, "Ann", AttendanceStatus.PRESENT), AttendanceEntry(2, "Bo", AttendanceStatus.ABSENT)],
    )

    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://backend.test/api/attendance/save"
    assert call["json"] == {
        "date": "2024-01-05",
        "entries": [{"studentId": 1, "status": "PRESENT"}, {"studentId": 2, "status": "ABSENT"}],
    }


def test_structured_error_body_is_surfaced_verbatim():
    session = FakeSession(make_response(400, {"message": "Invalid status for student 7"}))
    gateway = HttpAttendanceGateway(make_conn(session))

    with pytest.raises(ServerRejection) as exc:
        gateway.save_daily(date(2024, 1, 5), [AttendanceEntry(7, "G", AttendanceStatus.PRESENT)])

    assert exc.value.message == "Invalid status for student 7"
    assert exc.value.status_code == 400


def test_unstructured_error_body_falls_back_to_default_message():
    session = FakeSession(make_response(500, raw=b"<html>oops</html>"))
    gateway = HttpAttendanceGateway(make_conn(session))

    with pytest.raises(ServerRejection, match="Failed to load attendance"):
        gateway.get_daily(date(2024, 1, 5))


def test_connection_failure_is_transport_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    gateway = HttpAttendanceGateway(make_conn(session))

    with pytest.raises(TransportError, match=TRANSPORT_ERROR_MESSAGE):
        gateway.get_daily(date(2024, 1, 5))


def test_undecodable_roster_is_transport_error():
    session = FakeSession(make_response(200, raw=b"not json"))
    gateway = HttpAttendanceGateway(make_conn(session))

    with pytest.raises(TransportError):
        gateway.get_daily(date(2024, 1, 5))


def test_get_report_reads_legacy_summary():
    body = {"totalStudents": 4, "presentCount": 3, "absentCount": 1, "attendanceRate": 75.0}
    session = FakeSession(make_response(200, body))
    gateway = HttpAttendanceGateway(make_conn(session))

    report = gateway.get_report(date(2024, 1, 5))

    assert (report.total_students, report.present_count, report.absent_count) == (4, 3, 1)
    assert report.rate_label == "75.0%"


def test_add_student_returns_created_student():
    session = FakeSession(make_response(201, {"id": 9, "name": "Dana", "status": None}))
    gateway = HttpStudentGateway(make_conn(session))

    student = gateway.add_student("Dana")

    assert (student.student_id, student.name) == (9, "Dana")
    assert session.calls[0]["json"] == {"name": "Dana"}


def test_add_student_rejection_uses_server_message():
    session = FakeSession(make_response(400, {"message": "Please enter a valid name without numbers or symbols."}))
    gateway = HttpStudentGateway(make_conn(session))

    with pytest.raises(ServerRejection, match="valid name"):
        gateway.add_student("R2D2")
