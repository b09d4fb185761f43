"""State holder for the paginated user list screen."""

import logging
from dataclasses import dataclass
from typing import Self

from user_manager.application.use_cases import DeleteUserUseCase, GetAllUsersUseCase
from user_manager.domain.entities.user import UserPreview
from user_manager.domain.value_objects.operation_result import Error, Success
from user_manager.presentation.state.base import StateHolder
from user_manager.shared.errors import error_message

logger = logging.getLogger("user_manager.state.user_list")


@dataclass(frozen=True)
class UserListState:
    """Everything the list screen renders."""
    users: tuple[UserPreview, ...] = ()
    is_loading: bool = False
    is_loading_more: bool = False
    has_more_pages: bool = False
    error: str | None = None
    show_delete_dialog: bool = False
    user_to_delete: str | None = None


class UserListStateHolder(StateHolder[UserListState]):
    """Paginated, cached user list with optimistic deletion.

    Pages are cached by index so scrolling never refetches a page. Every
    page request is tagged with the generation it was issued in; ``refresh``
    starts a new generation and responses from older ones are dropped.
    Deleted rows are hidden immediately and restored if the server refuses
    the deletion.
    """

    def __init__(self, get_all_users: GetAllUsersUseCase, delete_user: DeleteUserUseCase):
        super().__init__(UserListState())
        self._get_all_users = get_all_users
        self._delete_user = delete_user

        self._pages: dict[int, list[UserPreview]] = {}
        self._current_page = 0
        self._total_pages = 0
        self._loading_more = False
        self._pending_deletions: set[str] = set()
        self._generation = 0

    @classmethod
    async def create(cls, get_all_users: GetAllUsersUseCase, delete_user: DeleteUserUseCase) -> Self:
        """Create a holder and load the first page."""
        holder = cls(get_all_users, delete_user)
        await holder.load_first_page()
        return holder

    @property
    def visible_users(self) -> tuple[UserPreview, ...]:
        """Cached pages in order, de-duplicated by id, minus pending deletions."""
        seen: set[str] = set()
        users: list[UserPreview] = []
        for index in sorted(self._pages):
            if index > self._current_page:
                break
            for user in self._pages[index]:
                if user.id in seen or user.id in self._pending_deletions:
                    continue
                seen.add(user.id)
                users.append(user)
        return tuple(users)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def cached_pages(self) -> dict[int, tuple[UserPreview, ...]]:
        """Read-only copy of the page cache."""
        return {index: tuple(users) for index, users in self._pages.items()}

    @property
    def pending_deletions(self) -> frozenset[str]:
        return frozenset(self._pending_deletions)

    @property
    def has_more_pages(self) -> bool:
        return self._current_page + 1 < self._total_pages

    def _publish(self, **changes) -> None:
        self._update(users=self.visible_users, has_more_pages=self.has_more_pages, **changes)

    def _is_stale(self, generation: int) -> bool:
        return self._closed or generation != self._generation

    async def load_first_page(self) -> None:
        """Fetch page 0 and replace the cache with it."""
        self._generation += 1
        generation = self._generation
        self._loading_more = False
        self._update(is_loading=True, is_loading_more=False, error=None)

        result = await self._get_all_users(0)
        if self._is_stale(generation):
            logger.debug(f"[UserList] dropped stale first page (generation {generation})")
            return

        if isinstance(result, Success):
            page = result.value
            self._pages = {0: list(page.items)}
            self._current_page = 0
            self._total_pages = page.page_count
            logger.info(f"[UserList] loaded page 0: {len(page)} users, {page.total} total")
            self._publish(is_loading=False, error=None)
        elif isinstance(result, Error):
            self._pages = {}
            self._current_page = 0
            self._total_pages = 0
            logger.warning(f"[UserList] first page failed: {result.message}")
            self._publish(is_loading=False, error=error_message(result))

    async def load_more(self) -> None:
        """Fetch and append the page after the current one.

        Calls made while a previous one is in flight, or when no further
        pages exist, are ignored. Every cached page is already visible, so
        each page index is fetched at most once per generation.
        """
        if self._loading_more or self._current_page + 1 >= self._total_pages:
            return

        self._loading_more = True
        next_page = self._current_page + 1

        self._update(is_loading_more=True)
        generation = self._generation
        try:
            result = await self._get_all_users(next_page)
        finally:
            if generation == self._generation:
                self._loading_more = False

        if self._is_stale(generation):
            logger.debug(f"[UserList] dropped stale page {next_page} (generation {generation})")
            return

        if isinstance(result, Success):
            page = result.value
            self._pages[next_page] = list(page.items)
            self._current_page = next_page
            self._total_pages = page.page_count
            logger.info(f"[UserList] loaded page {next_page}: {len(page)} users")
            self._publish(is_loading_more=False)
        elif isinstance(result, Error):
            logger.warning(f"[UserList] page {next_page} failed: {result.message}")
            self._publish(is_loading_more=False, error=error_message(result))
        else:
            self._publish(is_loading_more=False)

    async def refresh(self) -> None:
        """Drop the cache and pending deletions, then reload page 0."""
        self._pages.clear()
        self._pending_deletions.clear()
        self._current_page = 0
        self._total_pages = 0
        self._publish()
        await self.load_first_page()

    def request_delete(self, user_id: str) -> None:
        """Ask for confirmation before deleting ``user_id``."""
        self._update(show_delete_dialog=True, user_to_delete=user_id)

    def dismiss_delete(self) -> None:
        self._update(show_delete_dialog=False, user_to_delete=None)

    async def delete_confirmed(self, user_id: str | None = None) -> None:
        """Delete a user optimistically.

        The row disappears before the request is sent. On success it is
        purged from every cached page; on failure it reappears and the
        error is shown.

        Args:
            user_id: User to delete, defaults to the one awaiting confirmation
        """
        user_id = user_id or self._state.user_to_delete
        if not user_id:
            return

        self._pending_deletions.add(user_id)
        self._publish(show_delete_dialog=False, user_to_delete=None)
        logger.info(f"[UserList] deleting {user_id}")

        result = await self._delete_user(user_id)
        if self._closed:
            return

        if isinstance(result, Success):
            for index, users in self._pages.items():
                self._pages[index] = [user for user in users if user.id != user_id]
            self._publish(error=None)
        elif isinstance(result, Error):
            self._pending_deletions.discard(user_id)
            logger.warning(f"[UserList] delete of {user_id} rolled back: {result.message}")
            self._publish(error=error_message(result))
