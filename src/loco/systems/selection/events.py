"""Events for the selection system."""

from dataclasses import dataclass

from loco.events import Event
from loco.types import SelectionMode


@dataclass
class ItemSelectedEvent(Event):
    """Fired when the selected item changes.

    Attributes:
        item_id: Id of the newly selected item, or None after a deselect.
    """

    item_id: str | None


@dataclass
class SlotSelectedEvent(Event):
    """Fired when a hotbar slot is activated.

    Attributes:
        slot_index: The activated slot.
    """

    slot_index: int


@dataclass
class SelectionModeChangedEvent(Event):
    """Fired when switching between browse and assign-to-slot mode.

    Attributes:
        mode: The new mode.
    """

    mode: SelectionMode


@dataclass
class CatalogOpenedEvent(Event):
    """Fired when the catalog browse view opens."""


@dataclass
class CatalogClosedEvent(Event):
    """Fired when the catalog browse view closes.

    The host hides the view in response; hotbar contents are untouched.
    """
