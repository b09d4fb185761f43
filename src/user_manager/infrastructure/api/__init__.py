"""User service client and repository."""

from user_manager.infrastructure.api.base import ApiConfig
from user_manager.infrastructure.api.user_repository import HttpUserRepository
from user_manager.infrastructure.api.user_service import UserService

__all__ = [
    "ApiConfig",
    "HttpUserRepository",
    "UserService",
]
