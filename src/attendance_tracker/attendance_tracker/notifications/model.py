from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import NoticeLevel


@dataclass(frozen=True)
class Notice:
    """Transient message for the user, flashed under its level's category.

    How long the page shows it is a render setting (``NOTICE_DISMISS_SECONDS``).
    """

    level: NoticeLevel
    message: str

    @classmethod
    def success(cls, message: str) -> "Notice":
        return cls(NoticeLevel.SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> "Notice":
        return cls(NoticeLevel.INFO, message)

    @classmethod
    def warning(cls, message: str) -> "Notice":
        return cls(NoticeLevel.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "Notice":
        return cls(NoticeLevel.ERROR, message)
