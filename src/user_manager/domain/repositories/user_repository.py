"""User repository interface."""

from abc import ABC, abstractmethod

from user_manager.domain.entities.user import UserDetail, UserPage
from user_manager.domain.value_objects.operation_result import OperationResult


class UserRepository(ABC):
    """Repository interface for remote user records.

    Implementations convert every transport or server failure into an
    ``Error`` result; no exception crosses this boundary.
    """

    @abstractmethod
    async def list_users(self, page: int) -> OperationResult[UserPage]:
        """Fetch one page of user previews."""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> OperationResult[UserDetail]:
        """Fetch a full user record by ID."""
        pass

    @abstractmethod
    async def create_user(self, user: UserDetail) -> OperationResult[UserDetail]:
        """Create a user; the server assigns the ID."""
        pass

    @abstractmethod
    async def update_user(self, user: UserDetail) -> OperationResult[UserDetail]:
        """Replace a user's editable fields."""
        pass

    @abstractmethod
    async def delete_user(self, user_id: str) -> OperationResult[None]:
        """Delete a user by ID."""
        pass
