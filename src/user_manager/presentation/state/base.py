"""Base class for screen state holders."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import replace
from typing import Any, Generic, TypeVar

S = TypeVar("S")

logger = logging.getLogger("user_manager.state")


class StateHolder(Generic[S]):
    """Owns the immutable state snapshot of one screen.

    State is replaced wholesale through ``_update``; listeners receive every
    new snapshot. Background work started with ``launch`` is cancelled by
    ``close``, after which no further state is published.
    """

    def __init__(self, initial_state: S):
        self._state = initial_state
        self._listeners: list[Callable[[S], None]] = []
        self._tasks: set[asyncio.Task[Any]] = set()
        self._closed = False

    @property
    def state(self) -> S:
        """Current state snapshot."""
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes: Any) -> None:
        if self._closed:
            return
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    def clear_error(self) -> None:
        """Dismiss the current error message."""
        self._update(error=None)

    def launch(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Run a coroutine in the background, tied to this holder's lifetime."""
        if self._closed:
            coro.close()
            raise RuntimeError(f"{type(self).__name__} is closed")
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def close(self) -> None:
        """Cancel pending work and stop publishing state."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._listeners.clear()
        logger.debug(f"[{type(self).__name__}] closed, cancelled {len(tasks)} task(s)")
