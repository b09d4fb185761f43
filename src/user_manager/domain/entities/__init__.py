"""User entities."""

from user_manager.domain.entities.user import Location, UserDetail, UserPage, UserPreview

__all__ = ["Location", "UserDetail", "UserPage", "UserPreview"]
