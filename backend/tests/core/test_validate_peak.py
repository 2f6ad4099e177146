"""Peak Validation - tests for the coordinate grammar and height parsing.

Tests cover:
    - Valid coordinates pass (with and without the separator space)
    - Latitude above 90 / longitude above 179.x rejected
    - Exactly one message per mismatch
    - Empty coordinates accepted; name/country/height unchecked
    - parse_height accepts signed digit strings and ints, rejects the rest
"""

import pytest

from peaks.core.errors import InvalidHeightError
from peaks.core.peak import Peak
from peaks.core.validate_peak import (
    COORDINATES_ERROR,
    parse_height,
    validate_coordinates,
    validate_peak,
)


@pytest.mark.parametrize("coordinates", [
    "43.35, 42.44",
    "43.35,42.44",
    "-3.07, 37.35",
    "+45, -70.01",
    "90, 179.9999",
    "90.000, 0",
    "-90, -179",
    "0, 0",
    "9.5, 9",
])
def test_valid_coordinates_pass(coordinates):
    assert validate_coordinates(coordinates) == []


@pytest.mark.parametrize("coordinates", [
    "95.0, 42.44",
    "90.5, 10",
    "91, 10",
    "43.35, 180",
    "43.35, 200.5",
    "43.35,  42.44",
    "43.35 42.44",
    "43.35; 42.44",
    "abc",
    "43.35, 42.44\n",
    " 43.35, 42.44",
    "43., 42.44",
])
def test_invalid_coordinates_rejected(coordinates):
    assert validate_coordinates(coordinates) == [COORDINATES_ERROR]


def test_error_message_describes_expected_format():
    assert "latitude, longitude" in COORDINATES_ERROR


def test_empty_and_missing_coordinates_pass():
    assert validate_coordinates("") == []
    assert validate_coordinates(None) == []


def test_validate_peak_reports_single_error_for_bad_coordinates():
    peak = Peak(name="Elbrus", country="Russia", height=5642, coordinates="95.0, 42.44")
    assert validate_peak(peak) == [COORDINATES_ERROR]


def test_validate_peak_ignores_blank_name_country_and_odd_height():
    peak = Peak(name="", country="", height=-100_000, coordinates="")
    assert validate_peak(peak) == []


# ─── parse_height ────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("5642", 5642),
    (" 5642 ", 5642),
    ("-10", -10),
    ("+8848", 8848),
    (4808, 4808),
])
def test_parse_height_accepts_integers(raw, expected):
    assert parse_height(raw) == expected


@pytest.mark.parametrize("raw", [
    "56.4", "abc", "", "1_000", "5 642", None, True, False, 5642.5, 5642.0,
    "1" * 5000, ["5642"],
])
def test_parse_height_rejects_non_integers(raw):
    with pytest.raises(InvalidHeightError) as exc_info:
        parse_height(raw)
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "INVALID_HEIGHT"


def test_invalid_height_message_stays_short_for_huge_input():
    with pytest.raises(InvalidHeightError) as exc_info:
        parse_height("9" * 5000)
    assert len(exc_info.value.message) < 100
