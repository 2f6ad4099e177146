"""Error Hierarchy - response shapes and HTTP statuses."""

from peaks.core.errors import (
    ErrorCategory,
    ErrorContext,
    InvalidHeightError,
    PeakNotFoundError,
    PeakValidationError,
)


def test_validation_error_response_is_bare_message_list():
    exc = PeakValidationError(["bad coordinates"])
    assert exc.http_status == 400
    assert exc.to_response() == ["bad coordinates"]


def test_not_found_has_fixed_message_and_context():
    exc = PeakNotFoundError(ErrorContext(index=7))
    body = exc.to_response()
    assert exc.http_status == 404
    assert body["error"]["code"] == "PEAK_NOT_FOUND"
    assert body["error"]["message"] == "Peak not found."
    assert body["error"]["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["error"]["context"]["index"] == 7


def test_invalid_height_mentions_raw_value():
    exc = InvalidHeightError("abc")
    assert exc.http_status == 400
    assert "'abc'" in exc.message
