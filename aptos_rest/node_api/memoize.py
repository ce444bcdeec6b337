"""Per-instance, never-expiring cache for values fixed for a connection's lifetime."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheEntry(Generic[T]):
    """
    Holds one value computed by the first successful fetch.

    Failures are not stored, so the next call fetches again. There is no
    in-flight coalescing: two tasks that miss concurrently both fetch and the
    last one to finish wins. Only use this for facts that cannot change while
    the owning client is alive (e.g. the chain id).
    """

    __slots__ = ("name", "_value", "_filled")

    def __init__(self, name: str = "value") -> None:
        self.name = name
        self._value: Optional[T] = None
        self._filled = False

    @property
    def filled(self) -> bool:
        return self._filled

    @property
    def value(self) -> Optional[T]:
        return self._value

    async def get_or_fetch(self, fetch: Callable[[], Awaitable[T]]) -> T:
        if self._filled:
            logger.debug("Serving cached %s", self.name)
            return self._value  # type: ignore[return-value]
        value = await fetch()
        self._value = value
        self._filled = True
        return value

    def clear(self) -> None:
        self._value = None
        self._filled = False
