"""Ownership map for locators held by placed entities.

Session-local locators (object URLs, decoded buffers) must stay alive while any
placed entity uses them and be released once the last one is removed. The
LocatorLeases map tracks which entities hold which locator so the scene bridge
can release a locator at exactly that moment.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LocatorLeases:
    """Tracks which entities hold each locator."""

    def __init__(self) -> None:
        """Initialize an empty lease map."""
        self._holders: dict[str, set[str]] = {}
        self._locator_by_entity: dict[str, str] = {}

    def acquire(self, locator: str, entity_id: str) -> None:
        """Record that an entity holds a locator."""
        self._holders.setdefault(locator, set()).add(entity_id)
        self._locator_by_entity[entity_id] = locator

    def release(self, entity_id: str) -> str | None:
        """Drop an entity's lease.

        Returns:
            The locator if this was its last holder (the caller should free it),
            otherwise None.
        """
        locator = self._locator_by_entity.pop(entity_id, None)
        if locator is None:
            return None

        holders = self._holders.get(locator)
        if holders is None:
            return None
        holders.discard(entity_id)
        if holders:
            return None

        del self._holders[locator]
        logger.debug("Last lease on %s released", locator)
        return locator

    def holders(self, locator: str) -> set[str]:
        """Get the entities currently holding a locator."""
        return set(self._holders.get(locator, ()))

    def locator_of(self, entity_id: str) -> str | None:
        """Get the locator an entity holds, if any."""
        return self._locator_by_entity.get(entity_id)

    def clear(self) -> None:
        """Forget all leases."""
        self._holders.clear()
        self._locator_by_entity.clear()

    def __len__(self) -> int:
        """Number of locators with at least one holder."""
        return len(self._holders)
