"""User entities representing remote user records."""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Self


@dataclass(frozen=True)
class Location:
    """Postal address of a user."""

    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    timezone: str = ""

    def __str__(self) -> str:
        """Single-line address."""
        parts = [self.street, self.city, self.state, self.country]
        return ", ".join(part for part in parts if part)


@dataclass(frozen=True)
class UserPreview:
    """List-row projection of a user."""

    id: str
    title: str
    first_name: str
    last_name: str
    picture: str = ""

    @property
    def full_name(self) -> str:
        """First and last name."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Full name prefixed with the capitalised title, if any."""
        if self.title:
            return f"{self.title.capitalize()}. {self.full_name}"
        return self.full_name


@dataclass(frozen=True)
class UserDetail:
    """Full user record.

    The id is assigned by the server on creation and never changes
    afterwards. The email address can only be set on creation.
    """

    id: str
    title: str
    first_name: str
    last_name: str
    picture: str
    gender: str
    email: str
    date_of_birth: str
    phone: str
    location: Location | None = None
    register_date: str = ""
    updated_date: str = ""

    _IMMUTABLE_FIELDS = ("id", "email")

    @property
    def full_name(self) -> str:
        """First and last name."""
        return f"{self.first_name} {self.last_name}".strip()

    def to_preview(self) -> UserPreview:
        """Project the record onto a list row."""
        return UserPreview(
            id=self.id,
            title=self.title,
            first_name=self.first_name,
            last_name=self.last_name,
            picture=self.picture,
        )

    def with_changes(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If ``id`` or ``email`` would change
        """
        for name in self._IMMUTABLE_FIELDS:
            if name in changes and changes[name] != getattr(self, name):
                raise ValueError(f"User field '{name}' cannot be changed")
        return replace(self, **changes)


@dataclass(frozen=True)
class UserPage:
    """One page of user previews as returned by the list endpoint."""

    items: tuple[UserPreview, ...] = field(default_factory=tuple)
    page: int = 0
    limit: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        """Validate pagination metadata."""
        if self.page < 0:
            raise ValueError("Page index must be non-negative")
        if self.limit < 0 or self.total < 0:
            raise ValueError("Page limit and total must be non-negative")
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def has_more(self) -> bool:
        """Whether pages exist after this one."""
        if self.limit <= 0:
            return False
        return (self.page + 1) * self.limit < self.total

    @property
    def page_count(self) -> int:
        """Total number of pages, rounded up."""
        if self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)

    def __len__(self) -> int:
        return len(self.items)
