"""Peak Record - the single entity held by the catalog.

Invariants:
    - coordinates, when non-empty, must match COORDINATES_PATTERN (checked by
      validate_peak before the record reaches the repository)
    - height has no enforced range
    - id is 0 until the repository assigns one on add
"""

from dataclasses import dataclass

from peaks.core.domain_types import PeakId


@dataclass
class Peak:
    """A conquered peak. Mutable: only coordinates change after creation."""
    name: str = ""
    country: str = ""
    height: int = 0
    coordinates: str = ""
    id: PeakId = PeakId(0)
