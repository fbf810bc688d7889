"""View lifetime tracking for in-flight async operations.

Requests are never cancelled once issued. Instead, each view owns a
ViewLifetime; loads check `is_alive` before applying their results, so a
response that arrives after teardown is dropped instead of mutating a
destroyed owner.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class ViewLifetime:
    """Tracks outstanding operations of one view and whether it is still alive.

    Example:
        lifetime = ViewLifetime(name="campus_map")
        async with lifetime.track("load_catalog"):
            rows = await store.read_catalog()
            if lifetime.is_alive:
                apply(rows)
        lifetime.teardown()
    """

    def __init__(self, name: str = "view") -> None:
        self.name = name
        self._alive = True
        self._outstanding: dict[str, int] = {}

    @property
    def is_alive(self) -> bool:
        """False once teardown() has been called."""
        return self._alive

    @property
    def outstanding(self) -> int:
        """Number of tracked operations still in flight."""
        return sum(self._outstanding.values())

    def outstanding_operations(self) -> list[str]:
        """Names of in-flight operations (for logging/debug display)."""
        return sorted(name for name, count in self._outstanding.items() if count > 0)

    @asynccontextmanager
    async def track(self, operation: str) -> AsyncIterator[None]:
        """Count an operation as in flight for the duration of the block."""
        self._outstanding[operation] = self._outstanding.get(operation, 0) + 1
        try:
            yield
        finally:
            self._outstanding[operation] -= 1
            if self._outstanding[operation] == 0:
                del self._outstanding[operation]

    def accepts_results(self, operation: str) -> bool:
        """True if a finished operation may still apply its result; logs the drop otherwise."""
        if self._alive:
            return True
        logger.info(f"[LIFETIME] {self.name}: discarding late result of {operation}")
        return False

    def teardown(self) -> None:
        """Mark the view destroyed. Pending operations finish but their results are dropped."""
        if self._alive:
            logger.info(f"[LIFETIME] {self.name}: teardown with {self.outstanding} operation(s) in flight")
        self._alive = False
