"""Translation of API error codes into user-facing messages."""

import json
from enum import Enum

from user_manager.domain.value_objects.operation_result import Error


class ApiErrorType(Enum):
    """Error codes reported by the user service in ``{"error": "<code>"}``."""
    APP_ID_NOT_EXIST = "APP_ID_NOT_EXIST"
    APP_ID_MISSING = "APP_ID_MISSING"
    PARAMS_NOT_VALID = "PARAMS_NOT_VALID"
    BODY_NOT_VALID = "BODY_NOT_VALID"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    SERVER_ERROR = "SERVER_ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_code(cls, code: str | None) -> "ApiErrorType":
        """Look up a code, falling back to ``UNKNOWN``."""
        if not code:
            return cls.UNKNOWN
        try:
            return cls(code.strip().upper())
        except ValueError:
            return cls.UNKNOWN


_MESSAGES: dict[ApiErrorType, str] = {
    ApiErrorType.APP_ID_NOT_EXIST: "Authentication error. Please contact support.",
    ApiErrorType.APP_ID_MISSING: "Authentication error. Please contact support.",
    ApiErrorType.PARAMS_NOT_VALID: "Invalid request parameters. Please try again.",
    ApiErrorType.BODY_NOT_VALID: "Invalid data format. Please check your input and try again.",
    ApiErrorType.RESOURCE_NOT_FOUND: "The requested user was not found. It may have been deleted.",
    ApiErrorType.PATH_NOT_FOUND: "Service temporarily unavailable. Please try again later.",
    ApiErrorType.SERVER_ERROR: "Server error occurred. Please try again later.",
    ApiErrorType.UNKNOWN: "An unexpected error occurred. Please try again.",
}

# Phrasings produced by the repository itself when no envelope was returned
_PHRASES: tuple[tuple[str, ApiErrorType], ...] = (
    ("not found", ApiErrorType.RESOURCE_NOT_FOUND),
    ("server error", ApiErrorType.SERVER_ERROR),
    ("invalid user data", ApiErrorType.BODY_NOT_VALID),
)


def user_friendly_message(error_type: ApiErrorType) -> str:
    """Get the fixed user-facing sentence for an error type."""
    return _MESSAGES[error_type]


def parse_api_error(raw: str) -> ApiErrorType:
    """Classify a raw error string.

    Accepts the server's JSON envelope, a bare error code, or one of the
    repository's own error messages.
    """
    text = (raw or "").strip()
    if not text:
        return ApiErrorType.UNKNOWN

    try:
        payload = json.loads(text)
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        return ApiErrorType.from_code(payload.get("error"))

    for error_type in ApiErrorType:
        if error_type is not ApiErrorType.UNKNOWN and error_type.value in text:
            return error_type

    lowered = text.lower()
    for phrase, error_type in _PHRASES:
        if phrase in lowered:
            return error_type
    return ApiErrorType.UNKNOWN


def error_message(error: Error | str) -> str:
    """Get the user-facing message for an error result or raw string."""
    if isinstance(error, Error):
        if error.code:
            return user_friendly_message(ApiErrorType.from_code(error.code))
        return user_friendly_message(parse_api_error(error.message))
    return user_friendly_message(parse_api_error(error))
