from __future__ import annotations

from typing import Optional

from flask import flash

from .model import Notice


def flash_notice(notice: Optional[Notice]) -> None:
    if notice is not None:
        flash(notice.message, notice.level.value)
