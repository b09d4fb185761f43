"""Screen state holders."""

from user_manager.presentation.state.user_detail import UserDetailState, UserDetailStateHolder
from user_manager.presentation.state.user_form import (
    CreateUserStateHolder,
    EditUserStateHolder,
    UserFormState,
)
from user_manager.presentation.state.user_list import UserListState, UserListStateHolder
from user_manager.presentation.state.validation import UserForm, validate_user_form

__all__ = [
    "CreateUserStateHolder",
    "EditUserStateHolder",
    "UserDetailState",
    "UserDetailStateHolder",
    "UserForm",
    "UserFormState",
    "UserListState",
    "UserListStateHolder",
    "validate_user_form",
]
