"""Fetching updates by long polling and passing them to an event handler."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class _UpdateSource(Protocol):
    def get_updates(
        self, offset: int, limit: int, timeout: int, allowed_updates: Sequence[str] | None
    ) -> Sequence[Any]: ...


class _UpdateHandler(Protocol):
    def handle_update(self, update: Any) -> Any: ...


class TgLongPoll:
    """Polls ``api`` for updates and hands each one to ``event_handler``."""

    def __init__(
        self,
        api: _UpdateSource,
        event_handler: _UpdateHandler,
        limit: int = 100,
        timeout: int = 10,
        allow_updates: Sequence[str] | None = None,
    ) -> None:
        self._api = api
        self._event_handler = event_handler
        self._limit = limit
        self._timeout = timeout
        self._allow_updates = allow_updates
        self._last_update_id = 0

    @property
    def last_update_id(self) -> int:
        """The offset that the next poll will request."""
        return self._last_update_id

    def start(self) -> None:
        """Fetch one batch of updates and dispatch them; meant to run in a loop."""
        updates = self._api.get_updates(
            self._last_update_id, self._limit, self._timeout, self._allow_updates
        )
        for update in updates:
            if update.update_id >= self._last_update_id:
                self._last_update_id = update.update_id + 1
            self._event_handler.handle_update(update)