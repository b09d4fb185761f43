"""Value objects."""

from user_manager.domain.value_objects.operation_result import (
    Error,
    Loading,
    OperationResult,
    Success,
)

__all__ = ["Error", "Loading", "OperationResult", "Success"]
