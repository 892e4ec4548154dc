"""Hotbar system: nine quick-access slots persisted by item id.

This package provides:
- HotbarManager: slot assignment, persistence and resolution against the catalog
- Events: SlotAssignedEvent and SlotClearedEvent for presentation layers
"""

from loco.systems.hotbar.base import HotbarBaseManager
from loco.systems.hotbar.events import SlotAssignedEvent, SlotClearedEvent
from loco.systems.hotbar.manager import HotbarManager

__all__ = [
    "HotbarBaseManager",
    "HotbarManager",
    "SlotAssignedEvent",
    "SlotClearedEvent",
]
