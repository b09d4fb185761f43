"""List users page by page."""

from user_manager.domain.entities.user import UserPage
from user_manager.domain.repositories.user_repository import UserRepository
from user_manager.domain.value_objects.operation_result import OperationResult


class GetAllUsersUseCase:
    """Fetch one page of user previews."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def __call__(self, page: int) -> OperationResult[UserPage]:
        return await self.repository.list_users(page)
