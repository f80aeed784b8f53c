from __future__ import annotations

from ..api.connection import ApiConnection
from ..api.http_base import read_json, send
from ..core.constants import TRANSPORT_ERROR_MESSAGE
from ..core.exceptions import TransportError
from .model import Student


class HttpStudentGateway:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def add_student(self, name: str) -> Student:
        response = send(self._conn, "POST", "/students", json={"name": name}, fallback_message="Failed to add student")
        body = read_json(response)
        try:
            return Student(student_id=int(body["id"]), name=str(body["name"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportError(TRANSPORT_ERROR_MESSAGE) from exc
