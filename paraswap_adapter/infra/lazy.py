"""
Single-flight lazily initialized async value
"""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncLazy(Generic[T]):
    """
    Async value computed once, on first use.

    Concurrent callers that arrive while the factory is still running
    await the same in-flight task instead of starting a second one.
    A failed initialization is raised to every waiter and is not cached,
    so the next get() starts a fresh attempt.

    Usage:
        client = AsyncLazy(create_client)
        api = await client.get()
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], name: str = "value"):
        self._factory = factory
        self._name = name
        self._value: Optional[T] = None
        self._ready = False
        self._task: Optional["asyncio.Task[T]"] = None

    @property
    def is_ready(self) -> bool:
        return self._ready

    def set(self, value: T) -> None:
        """Pre-seed the value, skipping the factory"""
        self._value = value
        self._ready = True

    async def get(self) -> T:
        if self._ready:
            return self._value

        if self._task is None:
            logger.debug(f"Initializing {self._name}")
            self._task = asyncio.ensure_future(self._initialize())

        # shield: a cancelled waiter must not cancel the shared initialization
        return await asyncio.shield(self._task)

    async def _initialize(self) -> T:
        try:
            value = await self._factory()
        except Exception as e:
            self._task = None
            logger.warning(f"Failed to initialize {self._name}: {e}")
            raise
        self._value = value
        self._ready = True
        self._task = None
        return value
