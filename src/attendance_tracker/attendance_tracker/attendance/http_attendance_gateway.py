from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import read_json, send
from ..common.datetime_utils import format_iso_date
from ..core.constants import TRANSPORT_ERROR_MESSAGE
from ..core.enums import AttendanceStatus
from ..core.exceptions import TransportError
from .model import AttendanceEntry, ServerReport


class HttpAttendanceGateway:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_daily(self, work_date: date) -> Sequence[AttendanceEntry]:
        response = send(
            self._conn,
            "GET",
            "/attendance/daily",
            params={"date": format_iso_date(work_date)},
            fallback_message="Failed to load attendance",
        )
        body = read_json(response)
        if not isinstance(body, list):
            raise TransportError(TRANSPORT_ERROR_MESSAGE)
        return [self._map_entry(row) for row in body]

    def save_daily(self, work_date: date, entries: Sequence[AttendanceEntry]) -> None:
        payload = {
            "date": format_iso_date(work_date),
            "entries": [{"studentId": e.student_id, "status": e.status.value} for e in entries],
        }
        send(self._conn, "POST", "/attendance/save", json=payload, fallback_message="Failed to save attendance")

    def get_report(self, work_date: date) -> ServerReport:
        response = send(
            self._conn,
            "GET",
            "/attendance/report",
            params={"date": format_iso_date(work_date)},
            fallback_message="Failed to load attendance report",
        )
        body = read_json(response)
        try:
            return ServerReport(
                total_students=int(body["totalStudents"]),
                present_count=int(body["presentCount"]),
                absent_count=int(body["absentCount"]),
                attendance_rate=float(body["attendanceRate"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportError(TRANSPORT_ERROR_MESSAGE) from exc

    def _map_entry(self, row: Any) -> AttendanceEntry:
        try:
            raw_status = row.get("status")
            return AttendanceEntry(
                student_id=int(row["id"]),
                name=str(row["name"]),
                status=AttendanceStatus.parse(raw_status) if raw_status else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise TransportError(TRANSPORT_ERROR_MESSAGE) from exc
