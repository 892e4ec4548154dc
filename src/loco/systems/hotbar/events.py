"""Events for the hotbar system."""

from dataclasses import dataclass

from loco.events import Event


@dataclass
class SlotAssignedEvent(Event):
    """Fired when an item lands in a hotbar slot.

    Presentation layers subscribe to this to flash the slot.

    Attributes:
        slot_index: Slot that received the item.
        item_id: Id of the assigned item.
    """

    slot_index: int
    item_id: str


@dataclass
class SlotClearedEvent(Event):
    """Fired when a hotbar slot is emptied.

    Attributes:
        slot_index: Slot that was cleared.
    """

    slot_index: int
