"""State holders for the create and edit user screens."""

import logging
from dataclasses import dataclass
from datetime import datetime

from user_manager.application.use_cases import (
    CreateUserUseCase,
    GetUserDetailUseCase,
    UpdateUserUseCase,
)
from user_manager.domain.entities.user import UserDetail
from user_manager.domain.value_objects.operation_result import Error, Success
from user_manager.infrastructure.api.base import DEFAULT_PROFILE_IMAGE_URL
from user_manager.presentation.state.base import StateHolder
from user_manager.presentation.state.validation import (
    UserForm,
    submission_error_message,
    validate_user_form,
)
from user_manager.shared.errors import error_message

logger = logging.getLogger("user_manager.state.user_form")

EMAIL_IMMUTABLE = "Email address cannot be changed"
USER_NOT_LOADED = "Could not load user information"


@dataclass(frozen=True)
class UserFormState:
    """Submission state of a create or edit form."""
    user: UserDetail | None = None
    is_loading: bool = False
    is_success: bool = False
    error: str | None = None


class CreateUserStateHolder(StateHolder[UserFormState]):
    """Validates the form locally, then submits a new user."""

    def __init__(self, create_user: CreateUserUseCase):
        super().__init__(UserFormState())
        self._create_user = create_user

    async def submit(self, form: UserForm) -> None:
        violation = validate_user_form(form)
        if violation:
            self._update(error=violation, is_success=False)
            return

        values = form.normalized()
        now = datetime.now().isoformat()
        user = UserDetail(
            id="",
            title=values.title,
            first_name=values.first_name,
            last_name=values.last_name,
            picture=values.picture or DEFAULT_PROFILE_IMAGE_URL,
            gender=values.gender,
            email=values.email,
            date_of_birth=values.date_of_birth,
            phone=values.phone,
            location=values.location,
            register_date=now,
            updated_date=now,
        )

        self._update(is_loading=True, error=None, is_success=False)
        result = await self._create_user(user)
        if isinstance(result, Success):
            logger.info(f"[CreateUser] created {result.value.id}")
            self._update(is_loading=False, is_success=True, user=result.value, error=None)
        elif isinstance(result, Error):
            logger.warning(f"[CreateUser] failed: {result.message}")
            self._update(is_loading=False, error=submission_error_message(result))


class EditUserStateHolder(StateHolder[UserFormState]):
    """Loads a user, then submits edits as a full replacement.

    The email address cannot be edited; a form with a different email is
    rejected before any request is sent.
    """

    def __init__(self, get_user_detail: GetUserDetailUseCase, update_user: UpdateUserUseCase):
        super().__init__(UserFormState())
        self._get_user_detail = get_user_detail
        self._update_user = update_user

    async def load(self, user_id: str) -> None:
        self._update(is_loading=True, error=None)
        result = await self._get_user_detail(user_id)
        if isinstance(result, Success):
            self._update(is_loading=False, user=result.value, error=None)
        elif isinstance(result, Error):
            self._update(is_loading=False, error=error_message(result))

    def form(self) -> UserForm:
        """Form pre-filled with the loaded user."""
        if self._state.user is None:
            return UserForm()
        return UserForm.from_user(self._state.user)

    async def submit(self, form: UserForm) -> None:
        current = self._state.user
        if current is None:
            self._update(error=USER_NOT_LOADED)
            return

        violation = validate_user_form(form)
        if violation:
            self._update(error=violation, is_success=False)
            return

        values = form.normalized()
        if values.email.lower() != current.email.lower():
            self._update(error=EMAIL_IMMUTABLE, is_success=False)
            return

        updated = current.with_changes(
            title=values.title,
            first_name=values.first_name,
            last_name=values.last_name,
            gender=values.gender,
            date_of_birth=values.date_of_birth,
            phone=values.phone,
            picture=values.picture or current.picture,
            location=values.location,
            updated_date=datetime.now().isoformat(),
        )

        self._update(is_loading=True, error=None, is_success=False)
        result = await self._update_user(updated)
        if isinstance(result, Success):
            logger.info(f"[EditUser] updated {current.id}")
            self._update(is_loading=False, is_success=True, user=result.value, error=None)
        elif isinstance(result, Error):
            logger.warning(f"[EditUser] update of {current.id} failed: {result.message}")
            self._update(is_loading=False, error=submission_error_message(result))
