import pytest

from user_manager.domain.value_objects.operation_result import Error
from user_manager.shared.errors import (
    ApiErrorType,
    error_message,
    parse_api_error,
    user_friendly_message,
)


@pytest.mark.parametrize("error_type", list(ApiErrorType))
def test_envelope_codes_are_parsed(error_type):
    assert parse_api_error(f'{{"error": "{error_type.value}"}}') is error_type


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('{"error": "SOMETHING_NEW"}', ApiErrorType.UNKNOWN),
        ('{"error":"BODY_NOT_VALID","data":{"email":"Email already used"}}', ApiErrorType.BODY_NOT_VALID),
        ("", ApiErrorType.UNKNOWN),
        ("{broken", ApiErrorType.UNKNOWN),
        ("RESOURCE_NOT_FOUND", ApiErrorType.RESOURCE_NOT_FOUND),
        ("User not found", ApiErrorType.RESOURCE_NOT_FOUND),
        ("Failed to fetch users: 500 Internal Server Error", ApiErrorType.SERVER_ERROR),
        ("Network error: timed out", ApiErrorType.UNKNOWN),
    ],
)
def test_raw_strings_are_classified(raw, expected):
    assert parse_api_error(raw) is expected


def test_app_id_errors_share_a_message():
    assert user_friendly_message(ApiErrorType.APP_ID_MISSING) == user_friendly_message(ApiErrorType.APP_ID_NOT_EXIST)


def test_error_code_wins_over_message():
    error = Error("Failed to fetch users: 403 Forbidden", "APP_ID_MISSING")
    assert error_message(error) == "Authentication error. Please contact support."


def test_error_message_from_plain_string():
    assert error_message("User not found") == "The requested user was not found. It may have been deleted."
    assert error_message(Error("whatever")) == "An unexpected error occurred. Please try again."
