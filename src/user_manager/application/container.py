"""Wiring of repositories and use cases."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from user_manager.application.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllUsersUseCase,
    GetUserDetailUseCase,
    UpdateUserUseCase,
)
from user_manager.domain.repositories.user_repository import UserRepository
from user_manager.infrastructure.api.user_repository import HttpUserRepository
from user_manager.infrastructure.api.user_service import UserService
from user_manager.shared.config.settings import Settings


@dataclass
class UseCases:
    """All user use cases sharing one repository."""
    get_all_users: GetAllUsersUseCase
    get_user_detail: GetUserDetailUseCase
    create_user: CreateUserUseCase
    update_user: UpdateUserUseCase
    delete_user: DeleteUserUseCase


def build_use_cases(repository: UserRepository) -> UseCases:
    """Create the use case bundle for a repository."""
    return UseCases(
        get_all_users=GetAllUsersUseCase(repository),
        get_user_detail=GetUserDetailUseCase(repository),
        create_user=CreateUserUseCase(repository),
        update_user=UpdateUserUseCase(repository),
        delete_user=DeleteUserUseCase(repository),
    )


@asynccontextmanager
async def open_use_cases(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[UseCases]:
    """Build the HTTP-backed use cases and close the client on exit.

    Args:
        settings: Application settings
        transport: Optional ``httpx`` transport, used by tests

    Yields:
        Wired use cases
    """
    service = UserService(settings.get_api_config(), transport=transport)
    async with service:
        yield build_use_cases(HttpUserRepository(service))
