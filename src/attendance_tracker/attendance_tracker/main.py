from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, redirect, url_for

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .core.constants import (
    DEFAULT_DRAFT_IDLE_SECONDS,
    DEFAULT_MAX_DRAFTS,
    DEFAULT_NOTICE_DISMISS_SECONDS,
    DEFAULT_SUBMIT_GRACE_SECONDS,
)
from .students.controller import register as register_students


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["NOTICE_DISMISS_SECONDS"] = int(getattr(settings, "NOTICE_DISMISS_SECONDS", DEFAULT_NOTICE_DISMISS_SECONDS))
    app.config["INCLUDE_DATE_IN_EXPORT"] = bool(getattr(settings, "INCLUDE_DATE_IN_EXPORT", True))
    grace_seconds = float(getattr(settings, "SUBMIT_GRACE_SECONDS", DEFAULT_SUBMIT_GRACE_SECONDS))
    draft_idle_seconds = float(getattr(settings, "DRAFT_IDLE_SECONDS", DEFAULT_DRAFT_IDLE_SECONDS))
    max_drafts = int(getattr(settings, "MAX_DRAFTS", DEFAULT_MAX_DRAFTS))

    # Helpful startup info: which backend this UI is talking to.
    if app.config["DEBUG"]:
        print("[attendance-tracker] settings=", settings_module, " api=", api_config.get("base_url"))

    container = container or build_container(
        api_config=api_config,
        grace_seconds=grace_seconds,
        draft_idle_seconds=draft_idle_seconds,
        max_drafts=max_drafts,
    )

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("attendance_daily"))

    register_attendance(app, container)
    register_students(app, container)

    return app
