"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PeakId is a stable, process-unique integer (never reused)
    - PeakIndex is a positional offset: only valid until the next mutation
    - Sort fields encoded as an Enum, unknown values resolve to NAME
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PeakId = NewType("PeakId", int)
PeakIndex = NewType("PeakIndex", int)


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Fields the query pipeline can order by."""
    NAME = "name"
    COUNTRY = "country"
    HEIGHT = "height"

    @classmethod
    def parse(cls, value: str | None) -> "SortField":
        """Case-insensitive lookup; missing or unknown values fall back to NAME."""
        if not value:
            return cls.NAME
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NAME
