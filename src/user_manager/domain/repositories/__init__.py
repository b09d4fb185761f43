"""Repository interfaces."""

from user_manager.domain.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
