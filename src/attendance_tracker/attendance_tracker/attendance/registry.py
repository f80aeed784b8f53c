from __future__ import annotations

import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable

from ..core.constants import DEFAULT_DRAFT_IDLE_SECONDS, DEFAULT_MAX_DRAFTS
from .draft import AttendanceDraftManager


class DraftRegistry:
    """Owns one draft manager per browser session, keyed by an opaque id.

    Drafts idle longer than ``idle_seconds`` are dropped, and at most
    ``max_drafts`` are kept (least recently used goes first).
    """

    def __init__(
        self,
        factory: Callable[[], AttendanceDraftManager],
        *,
        idle_seconds: float = DEFAULT_DRAFT_IDLE_SECONDS,
        max_drafts: int = DEFAULT_MAX_DRAFTS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factory = factory
        self._idle_seconds = float(idle_seconds)
        self._max_drafts = max(1, int(max_drafts))
        self._clock = clock
        # draft id -> (manager, last used); oldest use first
        self._drafts: OrderedDict[str, tuple[AttendanceDraftManager, float]] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    def get(self, draft_id: str) -> AttendanceDraftManager:
        with self._lock:
            now = self._clock()
            self._evict_idle(now)

            item = self._drafts.pop(draft_id, None)
            draft = item[0] if item else self._factory()
            self._drafts[draft_id] = (draft, now)

            while len(self._drafts) > self._max_drafts:
                self._drafts.popitem(last=False)
            return draft

    def __len__(self) -> int:
        return len(self._drafts)

    def _evict_idle(self, now: float) -> None:
        while self._drafts:
            _, (_, last_used) = next(iter(self._drafts.items()))
            if now - last_used < self._idle_seconds:
                break
            self._drafts.popitem(last=False)
