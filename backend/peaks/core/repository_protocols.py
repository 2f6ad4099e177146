"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations provided by shell via dependency injection
    - Every method is synchronous and bounded (in-memory catalog)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - "Not found" is a return value (None / False), not an exception: the
      HTTP layer decides how to surface it
"""

from typing import Protocol

from peaks.core.domain_types import PeakId, PeakIndex
from peaks.core.peak import Peak
from peaks.core.query_peaks import PeakQuery


class PeakRepository(Protocol):
    """Contract for the peak catalog - implemented by shell."""

    def add(self, peak: Peak) -> PeakIndex: ...
    def count(self) -> int: ...
    def get_by_index(self, index: int) -> Peak | None: ...
    def update_coordinates(self, index: int, coordinates: str) -> Peak | None: ...
    def remove(self, index: int) -> bool: ...
    def query(self, query: PeakQuery) -> list[Peak]: ...

    def get_by_id(self, peak_id: PeakId) -> Peak | None: ...
    def index_of(self, peak_id: PeakId) -> PeakIndex | None: ...
    def update_coordinates_by_id(
        self, peak_id: PeakId, coordinates: str,
    ) -> Peak | None: ...
    def remove_by_id(self, peak_id: PeakId) -> bool: ...
