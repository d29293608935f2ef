"""
Dashboard activation tracking

One in-flight dashboard build per session. When a session asks for a new
patient or window before the previous build finished, the previous build is
cancelled and its caller gets ActivationSupersededError instead of stale data.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional, TypeVar

from patient_dashboard.core.errors import ActivationSupersededError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActivationRegistry:
    """
    Tracks the in-flight activation task per session key

    Only touched from the event loop thread, so no lock is needed.
    """
    def __init__(self):
        self._active: Dict[str, asyncio.Task] = {}

    def in_flight(self, session_key: str) -> bool:
        task = self._active.get(session_key)
        return task is not None and not task.done()

    async def run(self, session_key: Optional[str], factory: Callable[[], Awaitable[T]]) -> T:
        """
        Run an activation, superseding any unfinished one for the same session

        Args:
            session_key: Session identifier; None runs without supersession
            factory: Zero-argument callable returning the activation coroutine

        Raises:
            ActivationSupersededError: a newer activation replaced this one
        """
        if session_key is None:
            return await factory()

        previous = self._active.get(session_key)
        if previous is not None and not previous.done():
            logger.warning(f"Superseding in-flight dashboard activation for session {session_key}")
            previous.cancel()

        task = asyncio.ensure_future(factory())
        self._active[session_key] = task
        try:
            return await task
        except asyncio.CancelledError:
            if task.cancelled() and self._active.get(session_key) is not task:
                raise ActivationSupersededError(session_key)
            raise
        finally:
            if self._active.get(session_key) is task:
                del self._active[session_key]


# Global registry shared by all dashboard requests
_activation_registry = ActivationRegistry()


def get_activation_registry() -> ActivationRegistry:
    return _activation_registry
