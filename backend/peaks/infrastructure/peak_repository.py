"""In-Memory Peak Repository - ordered catalog guarded by a single lock.

Invariants:
    - One RLock serializes every read and write, including the whole query
      pipeline (no torn reads, no lost updates)
    - Positional index = insertion order minus removals; removal shifts later
      entries down by one
    - Ids are assigned on add, start at 1, increase monotonically, never reused
    - Callers only ever receive copies; stored Peak objects never escape

Design Decisions:
    - List + dict: the list keeps positional order, the dict gives O(1) lookup
      by stable id
    - threading.RLock over asyncio.Lock: methods are synchronous and may be
      called from FastAPI's threadpool as well as the event loop
    - Module-level singleton exposed through get_peak_repository() so routes
      receive it via Depends and tests can override it
"""

import itertools
import logging
import threading
from dataclasses import replace

from peaks.core.domain_types import PeakId, PeakIndex
from peaks.core.peak import Peak
from peaks.core.query_peaks import PeakQuery, run_query

logger = logging.getLogger(__name__)


class InMemoryPeakRepository:
    """Process-lifetime peak catalog."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._peaks: list[Peak] = []
        self._by_id: dict[PeakId, Peak] = {}
        self._ids = itertools.count(1)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._peaks)

    # ─── Positional operations ──────────────────────────────────

    def add(self, peak: Peak) -> PeakIndex:
        """Append a copy of peak, assign it an id, return its index.

        The caller's object receives the assigned id as well.
        """
        with self._lock:
            peak.id = PeakId(next(self._ids))
            stored = replace(peak)
            self._peaks.append(stored)
            self._by_id[stored.id] = stored
            index = PeakIndex(len(self._peaks) - 1)
        logger.info(
            f"Peak added at index {index}", extra={"peak_id": stored.id},
        )
        return index

    def count(self) -> int:
        with self._lock:
            return len(self._peaks)

    def get_by_index(self, index: int) -> Peak | None:
        with self._lock:
            if not self._in_range(index):
                return None
            return replace(self._peaks[index])

    def update_coordinates(self, index: int, coordinates: str) -> Peak | None:
        """Replace only the coordinates of the peak at index."""
        with self._lock:
            if not self._in_range(index):
                return None
            peak = self._peaks[index]
            peak.coordinates = coordinates
            updated = replace(peak)
        logger.info(
            f"Coordinates updated at index {index}",
            extra={"peak_id": updated.id},
        )
        return updated

    def remove(self, index: int) -> bool:
        with self._lock:
            if not self._in_range(index):
                return False
            peak = self._peaks.pop(index)
            del self._by_id[peak.id]
        logger.info(
            f"Peak removed from index {index}", extra={"peak_id": peak.id},
        )
        return True

    def query(self, query: PeakQuery) -> list[Peak]:
        """Run the filter/sort/paginate pipeline over a consistent snapshot."""
        with self._lock:
            return [replace(p) for p in run_query(self._peaks, query)]

    # ─── Stable-id operations ───────────────────────────────────

    def get_by_id(self, peak_id: PeakId) -> Peak | None:
        with self._lock:
            peak = self._by_id.get(peak_id)
            return replace(peak) if peak is not None else None

    def index_of(self, peak_id: PeakId) -> PeakIndex | None:
        """Current position of a peak; changes whenever an earlier peak is removed."""
        with self._lock:
            peak = self._by_id.get(peak_id)
            if peak is None:
                return None
            for i, candidate in enumerate(self._peaks):
                if candidate is peak:
                    return PeakIndex(i)
            return None

    def update_coordinates_by_id(
        self, peak_id: PeakId, coordinates: str,
    ) -> Peak | None:
        with self._lock:
            index = self.index_of(peak_id)
            if index is None:
                return None
            return self.update_coordinates(index, coordinates)

    def remove_by_id(self, peak_id: PeakId) -> bool:
        with self._lock:
            index = self.index_of(peak_id)
            if index is None:
                return False
            return self.remove(index)


_repository = InMemoryPeakRepository()


def init_repository() -> InMemoryPeakRepository:
    """Replace the process-wide catalog with an empty one."""
    global _repository
    _repository = InMemoryPeakRepository()
    return _repository


def get_peak_repository() -> InMemoryPeakRepository:
    """FastAPI dependency - the process-wide catalog."""
    return _repository
