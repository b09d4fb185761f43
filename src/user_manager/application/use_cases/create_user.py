"""Create a user."""

from user_manager.domain.entities.user import UserDetail
from user_manager.domain.repositories.user_repository import UserRepository
from user_manager.domain.value_objects.operation_result import OperationResult


class CreateUserUseCase:
    """Submit a new user record; the server assigns its ID."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def __call__(self, user: UserDetail) -> OperationResult[UserDetail]:
        return await self.repository.create_user(user)
