"""Conversions between transport DTOs and domain entities."""

from user_manager.domain.entities.user import Location, UserDetail, UserPage, UserPreview
from user_manager.infrastructure.api.base import DEFAULT_PROFILE_IMAGE_URL
from user_manager.infrastructure.api.dto import (
    LocationDto,
    UserCreateDto,
    UserFullDto,
    UserListDto,
    UserPreviewDto,
    UserUpdateDto,
)


def location_to_domain(dto: LocationDto) -> Location:
    return Location(
        street=dto.street,
        city=dto.city,
        state=dto.state,
        country=dto.country,
        timezone=dto.timezone,
    )


def location_to_dto(location: Location) -> LocationDto:
    return LocationDto(
        street=location.street,
        city=location.city,
        state=location.state,
        country=location.country,
        timezone=location.timezone,
    )


def preview_to_domain(dto: UserPreviewDto) -> UserPreview:
    return UserPreview(
        id=dto.id,
        title=dto.title,
        first_name=dto.first_name,
        last_name=dto.last_name,
        picture=dto.picture or DEFAULT_PROFILE_IMAGE_URL,
    )


def detail_to_domain(dto: UserFullDto) -> UserDetail:
    """Map a full record; ``updated_date`` falls back to the register date."""
    return UserDetail(
        id=dto.id,
        title=dto.title,
        first_name=dto.first_name,
        last_name=dto.last_name,
        picture=dto.picture or DEFAULT_PROFILE_IMAGE_URL,
        gender=dto.gender,
        email=dto.email,
        date_of_birth=dto.date_of_birth,
        phone=dto.phone,
        location=location_to_domain(dto.location) if dto.location else None,
        register_date=dto.register_date,
        updated_date=dto.updated_date or dto.register_date,
    )


def page_to_domain(dto: UserListDto) -> UserPage:
    return UserPage(
        items=tuple(preview_to_domain(item) for item in dto.data),
        page=dto.page,
        limit=dto.limit,
        total=dto.total,
    )


def to_create_dto(user: UserDetail) -> UserCreateDto:
    return UserCreateDto(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        title=user.title or None,
        gender=user.gender or None,
        date_of_birth=user.date_of_birth or None,
        phone=user.phone or None,
        picture=user.picture or None,
        location=location_to_dto(user.location) if user.location else None,
    )


def to_update_dto(user: UserDetail) -> UserUpdateDto:
    return UserUpdateDto(
        title=user.title or None,
        first_name=user.first_name or None,
        last_name=user.last_name or None,
        gender=user.gender or None,
        date_of_birth=user.date_of_birth or None,
        phone=user.phone or None,
        picture=user.picture or None,
        location=location_to_dto(user.location) if user.location else None,
    )
