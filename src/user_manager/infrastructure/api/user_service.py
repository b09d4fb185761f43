"""HTTP client for the user service."""

import logging
from typing import Any, Self
from urllib.parse import quote

import httpx

from user_manager.infrastructure.api.base import (
    CREATED_PARAM,
    LIMIT_PARAM,
    PAGE_PARAM,
    USER_BY_ID_ENDPOINT,
    USER_CREATE_ENDPOINT,
    USER_ENDPOINT,
    ApiConfig,
)

logger = logging.getLogger("user_manager.api")


class UserService:
    """Thin async wrapper over the user service endpoints.

    Returns raw ``httpx.Response`` objects; status handling and DTO parsing
    belong to the repository. Transport errors propagate as ``httpx``
    exceptions.
    """

    def __init__(self, config: ApiConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the underlying HTTP client."""
        if self._client is not None:
            return
        timeout = httpx.Timeout(
            connect=self.config.connect_timeout,
            read=self.config.read_timeout,
            write=self.config.write_timeout,
            pool=self.config.connect_timeout,
        )
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self.config.headers,
            timeout=timeout,
            transport=self._transport,
            event_hooks={"request": [self._log_request], "response": [self._log_response]},
        )
        logger.info(f"[API] Client ready for {self.config.base_url}")

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    async def _client_or_init(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.initialize()
        return self._client

    @staticmethod
    async def _log_request(request: httpx.Request) -> None:
        logger.debug(f"[API] --> {request.method} {request.url}")

    @staticmethod
    async def _log_response(response: httpx.Response) -> None:
        request = response.request
        logger.debug(f"[API] <-- {response.status_code} {request.method} {request.url}")

    async def get_users(
        self,
        page: int = 0,
        limit: int | None = None,
        created: str | None = None,
    ) -> httpx.Response:
        """List users sorted by registration date."""
        params: dict[str, Any] = {
            PAGE_PARAM: page,
            LIMIT_PARAM: limit or self.config.page_limit,
        }
        if created:
            params[CREATED_PARAM] = created
        client = await self._client_or_init()
        return await client.get(USER_ENDPOINT, params=params)

    @staticmethod
    def _user_path(user_id: str) -> str:
        return USER_BY_ID_ENDPOINT.format(id=quote(user_id, safe=""))

    async def get_user(self, user_id: str) -> httpx.Response:
        """Get a full user record."""
        client = await self._client_or_init()
        return await client.get(self._user_path(user_id))

    async def create_user(self, payload: dict[str, Any]) -> httpx.Response:
        """Create a user; firstName, lastName and email are required."""
        client = await self._client_or_init()
        return await client.post(USER_CREATE_ENDPOINT, json=payload)

    async def update_user(self, user_id: str, payload: dict[str, Any]) -> httpx.Response:
        """Update a user; the email address cannot be changed."""
        client = await self._client_or_init()
        return await client.put(self._user_path(user_id), json=payload)

    async def delete_user(self, user_id: str) -> httpx.Response:
        """Delete a user; the server answers with the deleted id."""
        client = await self._client_or_init()
        return await client.delete(self._user_path(user_id))

    async def close(self) -> None:
        """Close the client connection."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
