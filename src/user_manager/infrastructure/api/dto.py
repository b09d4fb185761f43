"""Transport models for the user service JSON payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Dto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LocationDto(_Dto):
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    timezone: str = ""


class UserPreviewDto(_Dto):
    id: str
    title: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    picture: str = ""


class UserFullDto(_Dto):
    id: str
    title: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    gender: str = ""
    email: str = ""
    date_of_birth: str = Field("", alias="dateOfBirth")
    register_date: str = Field("", alias="registerDate")
    updated_date: str | None = Field(None, alias="updatedDate")
    phone: str = ""
    picture: str = ""
    location: LocationDto | None = None


class UserCreateDto(_Dto):
    """Create payload; firstName, lastName and email are required."""
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    title: str | None = None
    gender: str | None = None
    date_of_birth: str | None = Field(None, alias="dateOfBirth")
    phone: str | None = None
    picture: str | None = None
    location: LocationDto | None = None


class UserUpdateDto(_Dto):
    """Update payload; the email address is never sent."""
    title: str | None = None
    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    gender: str | None = None
    date_of_birth: str | None = Field(None, alias="dateOfBirth")
    phone: str | None = None
    picture: str | None = None
    location: LocationDto | None = None


class UserListDto(_Dto):
    data: list[UserPreviewDto] = Field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0


class DeleteUserResponseDto(_Dto):
    id: str


class ApiErrorDto(_Dto):
    """Error envelope, e.g. ``{"error": "BODY_NOT_VALID", "data": {"email": "..."}}``."""
    error: str
    data: dict[str, Any] | None = None


def to_payload(dto: BaseModel) -> dict[str, Any]:
    """Serialize a DTO to camelCase JSON, dropping unset optional fields."""
    return dto.model_dump(by_alias=True, exclude_none=True)
