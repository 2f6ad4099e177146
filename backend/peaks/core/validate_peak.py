"""Peak Validation - coordinate grammar check and height parsing.

Invariants:
    - validate_peak is PURE: returns a list of messages, never raises
    - Only coordinates are checked; empty coordinates are accepted
    - A grammar mismatch yields exactly one message
    - parse_height raises InvalidHeightError; it never adds a list entry

Design Decisions:
    - name, country and height carry no required/range rules: existing clients
      create peaks with blank names and unchecked heights
    - COORDINATES_PATTERN is the single source of truth for the grammar
"""

import re

from peaks.core.errors import InvalidHeightError
from peaks.core.peak import Peak


COORDINATES_PATTERN = re.compile(
    r"^[-+]?([1-8]?[0-9](\.\d+)?|90(\.0+)?),\s?"
    r"[-+]?(1[0-7][0-9]|[1-9]?[0-9])(\.\d+)?$"
)

COORDINATES_ERROR = (
    "Coordinates must be in the format \"latitude, longitude\" "
    "(latitude -90..90, longitude -180..180), e.g. \"43.35, 42.44\"."
)

_HEIGHT_PATTERN = re.compile(r"^\s*[-+]?\d+\s*$", re.ASCII)


def validate_coordinates(coordinates: str | None) -> list[str]:
    """Check one coordinate string. Empty or missing passes."""
    if not coordinates:
        return []
    if not COORDINATES_PATTERN.fullmatch(coordinates):
        return [COORDINATES_ERROR]
    return []


def validate_peak(peak: Peak) -> list[str]:
    """Return every validation error for a candidate peak."""
    errors: list[str] = []
    errors.extend(validate_coordinates(peak.coordinates))
    return errors


def parse_height(raw: object) -> int:
    """Parse the boundary height value into an integer.

    Accepts a JSON integer or a string of ASCII digits with an optional
    sign and surrounding whitespace. Booleans, floats and everything else
    raise InvalidHeightError.
    """
    if isinstance(raw, bool):
        raise InvalidHeightError(raw)
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _HEIGHT_PATTERN.match(raw):
        raise InvalidHeightError(raw)
    try:
        return int(raw)
    except ValueError:
        # digit strings past sys.get_int_max_str_digits()
        raise InvalidHeightError(raw) from None
