import logging
import threading
from typing import Sequence

from .models import Format, ScheduleResult

logger = logging.getLogger(__name__)

CacheKey = tuple[str, tuple[str, ...], int]


def cache_key(roster: Sequence[str], format: Format, max_courts: int) -> CacheKey:
    """Key on the format, the roster irrespective of its order, and the number of courts."""
    return format, tuple(sorted(roster)), max_courts


class ScheduleCache:
    """Schedules computed so far, so that asking for the next round again yields a consistent sequence.

    Entries are complete, immutable schedules and are only ever replaced as a whole. Two threads missing on the same key
    may both compute a schedule; the later one wins.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, ScheduleResult] = {}

    def get(self, key: CacheKey) -> ScheduleResult | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: CacheKey, schedule: ScheduleResult):
        with self._lock:
            self._entries[key] = schedule

    def clear(self):
        with self._lock:
            n = len(self._entries)
            self._entries.clear()
        logger.debug("cleared %d cached schedule(s)", n)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

