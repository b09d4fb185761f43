"""Delete a user."""

from user_manager.domain.repositories.user_repository import UserRepository
from user_manager.domain.value_objects.operation_result import OperationResult


class DeleteUserUseCase:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def __call__(self, user_id: str) -> OperationResult[None]:
        return await self.repository.delete_user(user_id)
