from __future__ import annotations

from typing import Callable

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_iso_date, format_long_date, parse_iso_date
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import GatewayError, ValidationError
from ..notifications.flash import flash_notice
from .draft import AttendanceDraftManager
from .export import export_filename, render_csv
from .model import DraftResult
from .session_draft import current_draft


def register(app: Flask, container: Container) -> None:
    def _back_to_daily():
        query = request.values.get("q") or None
        return redirect(url_for("attendance_daily", q=query))

    def _parse_status(value: str | None) -> AttendanceStatus:
        try:
            return AttendanceStatus.parse(value or "")
        except ValueError:
            raise ValidationError("Unknown attendance status") from None

    def _navigate(draft: AttendanceDraftManager, load: Callable[[], DraftResult]) -> None:
        """Run a date change; warn when it replaced unsaved edits."""

        was_dirty = draft.dirty
        left_date = draft.active_date
        result = load()
        if was_dirty and not result.snapshot.dirty:
            flash(f"Unsaved changes for {format_iso_date(left_date)} were discarded", "warning")
        flash_notice(result.notice)

    @app.route("/attendance", methods=["GET"], endpoint="attendance_daily")
    def attendance_daily():
        draft = current_draft(container.drafts)

        requested = None
        date_s = request.args.get("date")
        if date_s:
            try:
                requested = parse_iso_date(date_s)
            except ValueError:
                flash("Invalid date format. Use YYYY-MM-DD", "warning")

        if requested is not None and requested != draft.active_date:
            _navigate(draft, lambda: draft.load(requested))
        elif draft.active_date is None:
            flash_notice(draft.go_today().notice)

        snapshot = draft.snapshot()
        query = request.args.get("q", "")

        report = None
        if snapshot.active_date is not None:
            try:
                report = container.attendance_gateway.get_report(snapshot.active_date)
            except GatewayError as e:
                app.logger.info("Saved report unavailable for %s: %s", snapshot.active_date, e)

        return render_template(
            "attendance/daily.html",
            snapshot=snapshot,
            rows=draft.filter(query),
            query=query,
            report=report,
            statuses=list(AttendanceStatus),
            active_date=format_iso_date(snapshot.active_date) if snapshot.active_date else "",
            long_date=format_long_date(snapshot.active_date) if snapshot.active_date else "",
        )

    @app.route("/attendance/status", methods=["POST"], endpoint="attendance_set_status")
    def attendance_set_status():
        draft = current_draft(container.drafts)
        try:
            student_id = int(request.form.get("student_id") or 0)
            status = _parse_status(request.form.get("status"))
            flash_notice(draft.set_status(student_id, status).notice)
        except ValueError:
            flash("Invalid student", "warning")
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to_daily()

    @app.route("/attendance/mark-all", methods=["POST"], endpoint="attendance_mark_all")
    def attendance_mark_all():
        draft = current_draft(container.drafts)
        try:
            status = _parse_status(request.form.get("status"))
            confirmed = request.form.get("confirm") == "yes"
            flash_notice(draft.set_all_status(status, confirmed=confirmed).notice)
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to_daily()

    @app.route("/attendance/finish", methods=["POST"], endpoint="attendance_finish")
    def attendance_finish():
        draft = current_draft(container.drafts)
        try:
            flash_notice(draft.commit().notice)
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("Unexpected error while saving attendance")
            flash("System error while saving attendance", "danger")
        return _back_to_daily()

    @app.route("/attendance/reload", methods=["POST"], endpoint="attendance_reload")
    def attendance_reload():
        draft = current_draft(container.drafts)
        flash_notice(draft.reload().notice)
        return _back_to_daily()

    @app.route("/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        draft = current_draft(container.drafts)
        _navigate(draft, draft.go_today)
        return _back_to_daily()

    @app.route("/attendance/prev", methods=["GET"], endpoint="attendance_prev")
    def attendance_prev():
        draft = current_draft(container.drafts)
        _navigate(draft, lambda: draft.shift_day(-1))
        return _back_to_daily()

    @app.route("/attendance/next", methods=["GET"], endpoint="attendance_next")
    def attendance_next():
        draft = current_draft(container.drafts)
        _navigate(draft, lambda: draft.shift_day(1))
        return _back_to_daily()

    @app.route("/attendance/export.csv", methods=["GET"], endpoint="attendance_export_csv")
    def attendance_export_csv():
        draft = current_draft(container.drafts)
        if draft.active_date is None:
            flash("Nothing to export yet", "info")
            return redirect(url_for("attendance_daily"))

        body = render_csv(draft.export_snapshot(), include_date=app.config["INCLUDE_DATE_IN_EXPORT"])
        return app.response_class(
            body.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(draft.active_date)}"},
        )
