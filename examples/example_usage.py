"""Example: drive the attendance draft without Flask.

Goal: show that controllers are a thin layer; the draft logic lives in the
draft manager and talks to the backend through the gateways.
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.datetime_utils import today_local
from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)
    draft = container.drafts.get(container.drafts.new_id())

    result = draft.load(today_local())
    if result.notice:
        print(result.notice.message)
        return

    summary = result.snapshot.summary
    print(f"{summary.total} students, {summary.present} present, {summary.absent} absent, rate {summary.rate_label}")


if __name__ == "__main__":
    main()
