"""User repository backed by the HTTP user service."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
from pydantic import ValidationError

from user_manager.domain.entities.user import UserDetail, UserPage
from user_manager.domain.repositories.user_repository import UserRepository
from user_manager.domain.value_objects.operation_result import Error, OperationResult, Success
from user_manager.infrastructure.api.dto import (
    ApiErrorDto,
    DeleteUserResponseDto,
    UserFullDto,
    UserListDto,
    to_payload,
)
from user_manager.infrastructure.api.mapper import (
    detail_to_domain,
    page_to_domain,
    to_create_dto,
    to_update_dto,
)
from user_manager.infrastructure.api.user_service import UserService

logger = logging.getLogger("user_manager.repository")

T = TypeVar("T")

NOT_FOUND = "User not found"
EMPTY_RESPONSE = "Empty response from server"
CREATE_INVALID = (
    "Invalid user data - firstName, lastName, and email are required. "
    "Email must be unique."
)
UPDATE_INVALID = "Invalid user data - email cannot be updated"
ALREADY_EXISTS = "User already exists"
UNEXPECTED_RESPONSE = "Unexpected response from server"


def _parse_error(response: httpx.Response) -> ApiErrorDto | None:
    """Read the ``{"error": code}`` envelope if the body carries one."""
    try:
        return ApiErrorDto.model_validate(response.json())
    except (ValueError, ValidationError):
        return None


def _status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class HttpUserRepository(UserRepository):
    """Maps user service responses onto domain results.

    Every outcome, including network failures and malformed bodies, is
    returned as a ``Success`` or ``Error``.
    """

    def __init__(self, service: UserService, page_limit: int | None = None):
        self.service = service
        self.page_limit = page_limit or service.config.page_limit

    async def _call(
        self,
        operation: str,
        request: Callable[[], Awaitable[httpx.Response]],
        on_success: Callable[[httpx.Response], OperationResult[T]],
        on_failure: Callable[[httpx.Response, ApiErrorDto | None], Error],
    ) -> OperationResult[T]:
        try:
            response = await request()
        except httpx.TransportError as e:
            logger.warning(f"[{operation}] network error: {e}")
            return Error(f"Network error: {e}")
        except httpx.HTTPError as e:
            logger.warning(f"[{operation}] HTTP error: {e}")
            return Error(f"HTTP error: {e}")
        except httpx.InvalidURL as e:
            logger.warning(f"[{operation}] invalid request URL: {e}")
            return Error(f"Invalid request: {e}")

        try:
            if response.is_success:
                return on_success(response)
            envelope = _parse_error(response)
            error = on_failure(response, envelope)
            if error.code is None and response.is_server_error:
                error = Error(error.message, "SERVER_ERROR")
            logger.info(f"[{operation}] failed with {_status_line(response)}: {error.message}")
            return error
        except (ValueError, ValidationError) as e:
            logger.warning(f"[{operation}] malformed response: {e}")
            return Error(f"Malformed response from server: {e}")
        except Exception as e:
            logger.exception(f"[{operation}] unexpected error")
            return Error(f"Unexpected error: {e}")

    @staticmethod
    def _has_body(response: httpx.Response) -> bool:
        return bool(response.content.strip()) and response.content.strip() != b"null"

    def _full_user(self, response: httpx.Response, empty_message: str) -> OperationResult[UserDetail]:
        if not self._has_body(response):
            return Error(empty_message)
        return Success(detail_to_domain(UserFullDto.model_validate(response.json())))

    async def list_users(self, page: int) -> OperationResult[UserPage]:
        def on_success(response: httpx.Response) -> OperationResult[UserPage]:
            if not self._has_body(response):
                return Error(EMPTY_RESPONSE)
            return Success(page_to_domain(UserListDto.model_validate(response.json())))

        def on_failure(response: httpx.Response, envelope: ApiErrorDto | None) -> Error:
            return Error(
                f"Failed to fetch users: {_status_line(response)}",
                envelope.error if envelope else None,
            )

        return await self._call(
            "list_users",
            lambda: self.service.get_users(page=page, limit=self.page_limit),
            on_success,
            on_failure,
        )

    async def get_user(self, user_id: str) -> OperationResult[UserDetail]:
        def on_failure(response: httpx.Response, envelope: ApiErrorDto | None) -> Error:
            code = envelope.error if envelope else None
            if response.status_code == 404:
                return Error(NOT_FOUND, code or "RESOURCE_NOT_FOUND")
            return Error(f"Failed to fetch user: {_status_line(response)}", code)

        return await self._call(
            "get_user",
            lambda: self.service.get_user(user_id),
            lambda response: self._full_user(response, NOT_FOUND),
            on_failure,
        )

    async def create_user(self, user: UserDetail) -> OperationResult[UserDetail]:
        def on_failure(response: httpx.Response, envelope: ApiErrorDto | None) -> Error:
            code = envelope.error if envelope else None
            if response.status_code == 400:
                message = CREATE_INVALID
                if envelope and envelope.data:
                    details = "; ".join(f"{key}: {value}" for key, value in envelope.data.items())
                    message = f"{message} ({envelope.error}: {details})"
                return Error(message, code or "BODY_NOT_VALID")
            if response.status_code == 409:
                return Error(ALREADY_EXISTS, code)
            return Error(f"Failed to create user: {_status_line(response)}", code)

        return await self._call(
            "create_user",
            lambda: self.service.create_user(to_payload(to_create_dto(user))),
            lambda response: self._full_user(response, EMPTY_RESPONSE),
            on_failure,
        )

    async def update_user(self, user: UserDetail) -> OperationResult[UserDetail]:
        def on_failure(response: httpx.Response, envelope: ApiErrorDto | None) -> Error:
            code = envelope.error if envelope else None
            if response.status_code == 400:
                return Error(UPDATE_INVALID, code or "BODY_NOT_VALID")
            if response.status_code == 404:
                return Error(NOT_FOUND, code or "RESOURCE_NOT_FOUND")
            return Error(f"Failed to update user: {_status_line(response)}", code)

        return await self._call(
            "update_user",
            lambda: self.service.update_user(user.id, to_payload(to_update_dto(user))),
            lambda response: self._full_user(response, EMPTY_RESPONSE),
            on_failure,
        )

    async def delete_user(self, user_id: str) -> OperationResult[None]:
        def on_success(response: httpx.Response) -> OperationResult[None]:
            if not self._has_body(response):
                return Error(UNEXPECTED_RESPONSE)
            deleted = DeleteUserResponseDto.model_validate(response.json())
            if deleted.id != user_id:
                return Error(UNEXPECTED_RESPONSE)
            return Success(None)

        def on_failure(response: httpx.Response, envelope: ApiErrorDto | None) -> Error:
            code = envelope.error if envelope else None
            if response.status_code == 404:
                return Error(NOT_FOUND, code or "RESOURCE_NOT_FOUND")
            return Error(f"Failed to delete user: {_status_line(response)}", code)

        return await self._call(
            "delete_user",
            lambda: self.service.delete_user(user_id),
            on_success,
            on_failure,
        )
