# Area: Bridge
"""
game_bridge._bridge.session_owner — Single owner of the game session
=====================================================================

Every read or write of the GameSession goes through one worker thread.
The command server submits work here instead of calling into the session
directly, and so can any player-interface code running on other threads;
two callers therefore never touch the session at the same time.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from ..session import GameSession

logger = logging.getLogger("game_bridge.session")

T = TypeVar("T")

THREAD_NAME_PREFIX = "session-owner"


class SessionOwner:
    """Serializes all access to one :class:`GameSession`."""

    def __init__(self, session: GameSession):
        self._session = session
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix=THREAD_NAME_PREFIX
        )

    def submit(
        self, fn: Callable[..., T], *args: Any, **kwargs: Any
    ) -> "Future[T]":
        """Schedule ``fn(session, *args, **kwargs)`` on the owner thread."""
        return self._executor.submit(fn, self._session, *args, **kwargs)

    def call(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run ``fn(session, *args, **kwargs)`` on the owner thread and wait.

        Exceptions raised by ``fn`` are re-raised in the caller.
        """
        return self.submit(fn, *args, **kwargs).result()

    def shutdown(self, wait: bool = True) -> None:
        logger.debug("Session owner shutting down")
        self._executor.shutdown(wait=wait)
