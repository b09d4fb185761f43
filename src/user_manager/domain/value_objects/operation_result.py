"""Operation result value objects.

Every repository call resolves to exactly one of three variants:
``Success`` carrying the value, ``Error`` carrying a message (and the
server error code when one was reported) or ``Loading`` while in progress.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Completed operation with a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_error(self) -> bool:
        return False

    @property
    def is_loading(self) -> bool:
        return False


@dataclass(frozen=True)
class Error:
    """Failed operation."""

    message: str
    code: str | None = None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return True

    @property
    def is_loading(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Loading:
    """Operation still in progress."""

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return False

    @property
    def is_loading(self) -> bool:
        return True


OperationResult = Success[T] | Error | Loading
