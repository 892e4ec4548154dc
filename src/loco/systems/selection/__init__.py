"""Selection system: keyboard, pointer and mode arbitration for the catalog view."""

from loco.systems.selection.base import SelectionBaseManager
from loco.systems.selection.events import (
    CatalogClosedEvent,
    CatalogOpenedEvent,
    ItemSelectedEvent,
    SelectionModeChangedEvent,
    SlotSelectedEvent,
)
from loco.systems.selection.manager import SelectionManager

__all__ = [
    "CatalogClosedEvent",
    "CatalogOpenedEvent",
    "ItemSelectedEvent",
    "SelectionBaseManager",
    "SelectionManager",
    "SelectionModeChangedEvent",
    "SlotSelectedEvent",
]
