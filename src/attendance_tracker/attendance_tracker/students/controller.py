from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..attendance.session_draft import current_draft
from ..container import Container
from ..core.exceptions import GatewayError, ValidationError
from ..notifications.flash import flash_notice


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["POST"], endpoint="students_add")
    def students_add():
        try:
            student = container.student_service.add_student(request.form.get("name") or "")
        except ValidationError as e:
            flash(str(e), "warning")
        except GatewayError as e:
            flash(str(e), "danger")
        else:
            flash(f'Student "{student.name}" added successfully! ID: {student.student_id}', "success")
            draft = current_draft(container.drafts)
            if draft.dirty:
                flash("Finish or reload the day to include the new student", "info")
            else:
                flash_notice(draft.reload().notice)
        return redirect(url_for("attendance_daily"))
