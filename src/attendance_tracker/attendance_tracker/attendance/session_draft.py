from __future__ import annotations

from flask import session

from .draft import AttendanceDraftManager
from .registry import DraftRegistry


def current_draft(drafts: DraftRegistry) -> AttendanceDraftManager:
    """Draft belonging to the current browser session (created on first use)."""

    draft_id = session.get("draft_id")
    if not draft_id:
        draft_id = drafts.new_id()
        session["draft_id"] = draft_id
    return drafts.get(draft_id)
