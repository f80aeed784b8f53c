from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.connection import ApiConfig, ApiConnection
from .attendance.draft import AttendanceDraftManager
from .attendance.gateway import AttendanceGateway
from .attendance.http_attendance_gateway import HttpAttendanceGateway
from .attendance.registry import DraftRegistry
from .core.constants import (
    DEFAULT_API_TIMEOUT_SECONDS,
    DEFAULT_DRAFT_IDLE_SECONDS,
    DEFAULT_MAX_DRAFTS,
    DEFAULT_SUBMIT_GRACE_SECONDS,
)
from .students.gateway import StudentGateway
from .students.http_student_gateway import HttpStudentGateway
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    attendance_gateway: AttendanceGateway
    student_gateway: StudentGateway

    student_service: StudentService
    drafts: DraftRegistry


def build_container(
    *,
    api_config: dict,
    grace_seconds: float = DEFAULT_SUBMIT_GRACE_SECONDS,
    draft_idle_seconds: float = DEFAULT_DRAFT_IDLE_SECONDS,
    max_drafts: int = DEFAULT_MAX_DRAFTS,
    attendance_gateway: Optional[AttendanceGateway] = None,
    student_gateway: Optional[StudentGateway] = None,
) -> Container:
    """Wire gateways, services and the draft registry.

    Gateways can be passed in to run the app against in-memory fakes.
    """

    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    conn = ApiConnection.get_instance(config)

    attendance_gateway = attendance_gateway or HttpAttendanceGateway(conn)
    student_gateway = student_gateway or HttpStudentGateway(conn)

    student_service = StudentService(student_gateway)
    drafts = DraftRegistry(
        lambda: AttendanceDraftManager(attendance_gateway, grace_seconds=grace_seconds),
        idle_seconds=draft_idle_seconds,
        max_drafts=max_drafts,
    )

    return Container(
        conn=conn,
        attendance_gateway=attendance_gateway,
        student_gateway=student_gateway,
        student_service=student_service,
        drafts=drafts,
    )
