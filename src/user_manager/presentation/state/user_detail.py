"""State holder for the user detail screen."""

import logging
from dataclasses import dataclass

from user_manager.application.use_cases import DeleteUserUseCase, GetUserDetailUseCase
from user_manager.domain.entities.user import UserDetail
from user_manager.domain.value_objects.operation_result import Error, Success
from user_manager.presentation.state.base import StateHolder
from user_manager.shared.errors import error_message

logger = logging.getLogger("user_manager.state.user_detail")


@dataclass(frozen=True)
class UserDetailState:
    user: UserDetail | None = None
    is_loading: bool = False
    error: str | None = None
    show_delete_dialog: bool = False
    user_deleted: bool = False


class UserDetailStateHolder(StateHolder[UserDetailState]):
    """Shows one user and deletes it after confirmation."""

    def __init__(self, get_user_detail: GetUserDetailUseCase, delete_user: DeleteUserUseCase):
        super().__init__(UserDetailState())
        self._get_user_detail = get_user_detail
        self._delete_user = delete_user

    async def load(self, user_id: str) -> None:
        self._update(is_loading=True, error=None, user_deleted=False)
        result = await self._get_user_detail(user_id)
        if isinstance(result, Success):
            self._update(is_loading=False, user=result.value, error=None)
        elif isinstance(result, Error):
            logger.warning(f"[UserDetail] load of {user_id} failed: {result.message}")
            self._update(is_loading=False, error=error_message(result))

    def request_delete(self) -> None:
        self._update(show_delete_dialog=True)

    def dismiss_delete(self) -> None:
        self._update(show_delete_dialog=False)

    async def delete(self, user_id: str | None = None) -> None:
        """Delete the shown user, or ``user_id`` when nothing is loaded."""
        if user_id is None and self._state.user is not None:
            user_id = self._state.user.id
        if not user_id:
            return

        self._update(is_loading=True, error=None)
        result = await self._delete_user(user_id)
        if isinstance(result, Success):
            logger.info(f"[UserDetail] deleted {user_id}")
            self._update(is_loading=False, show_delete_dialog=False, user_deleted=True, error=None)
        elif isinstance(result, Error):
            logger.warning(f"[UserDetail] delete of {user_id} failed: {result.message}")
            self._update(is_loading=False, show_delete_dialog=False, error=error_message(result))
