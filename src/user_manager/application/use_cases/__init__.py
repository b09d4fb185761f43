"""User use cases."""

from user_manager.application.use_cases.create_user import CreateUserUseCase
from user_manager.application.use_cases.delete_user import DeleteUserUseCase
from user_manager.application.use_cases.get_all_users import GetAllUsersUseCase
from user_manager.application.use_cases.get_user_detail import GetUserDetailUseCase
from user_manager.application.use_cases.update_user import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetAllUsersUseCase",
    "GetUserDetailUseCase",
    "UpdateUserUseCase",
]
