"""Selection: the single owner of the selected item and the selected slot.

This module provides the SelectionManager class, which arbitrates keyboard
shortcuts, pointer clicks and mode toggles.

Two modes are supported:
- Browse: selecting a catalog item only selects it.
- AssignToSlot: selecting a catalog item while a slot is selected also assigns
  the item to that slot.

Activating a slot (digit key or click) is a combined operation: the slot becomes
selected and, if it holds an item, that item is selected and placed in the scene.
An empty slot is selected with no item and nothing is placed.

Keyboard surface (only while the catalog view is open and no text input has focus):
- 1-9: activate hotbar slot 1-9
- E / Escape: close the catalog view
- B: toggle browse / assign-to-slot
- Q: deselect

Example usage:
    selection = context.selection_manager
    selection.open()

    selection.set_mode(SelectionMode.ASSIGN_TO_SLOT)
    selection.select_slot(3)
    selection.select_item(item)  # item lands in slot 4

    context.dispatch_key_press(arcade.key.KEY_1, 0)  # place whatever is in slot 1
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, cast

import arcade

from loco.constants import CLOSE_KEYS, DESELECT_KEY, HOTBAR_SLOT_COUNT, SLOT_KEYS, TOGGLE_MODE_KEY
from loco.systems.catalog.events import CatalogItemRemovedEvent, CatalogLoadedEvent, CatalogTabChangedEvent
from loco.systems.registry import SystemRegistry
from loco.systems.selection.base import SelectionBaseManager
from loco.systems.selection.events import (
    CatalogClosedEvent,
    CatalogOpenedEvent,
    ItemSelectedEvent,
    SelectionModeChangedEvent,
    SlotSelectedEvent,
)
from loco.types import SelectionMode

if TYPE_CHECKING:
    from loco.events import Event
    from loco.systems.catalog.base import CatalogItem
    from loco.systems.context import CatalogContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class SelectionManager(SelectionBaseManager):
    """Tracks the current selection and turns input into hotbar and scene actions.

    Attributes:
        selected_item: The selected catalog item, or None.
        selected_slot_index: The selected hotbar slot, or None.
        mode: Browse or assign-to-slot.
        showing: Whether the catalog browse view is open.
        text_input_focused: Set by the host while a text field has focus; the
            keyboard surface is ignored meanwhile.
    """

    name: ClassVar[str] = "selection"
    dependencies: ClassVar[list[str]] = ["hotbar", "scene", "catalog"]

    def __init__(self) -> None:
        """Initialize with nothing selected, in browse mode."""
        self.selected_item: CatalogItem | None = None
        self.selected_slot_index: int | None = None
        self.mode: SelectionMode = SelectionMode.BROWSE
        self.showing: bool = False
        self.text_input_focused: bool = False

    def setup(self, context: CatalogContext) -> None:
        """Subscribe to catalog events that invalidate the selection."""
        self.context = context
        context.event_bus.subscribe(CatalogTabChangedEvent, self._on_tab_changed)
        context.event_bus.subscribe(CatalogLoadedEvent, self._on_catalog_loaded)
        context.event_bus.subscribe(CatalogItemRemovedEvent, self._on_item_removed)
        logger.debug("SelectionManager setup complete")

    def cleanup(self) -> None:
        """Unsubscribe and reset the selection."""
        if hasattr(self, "context"):
            self.context.event_bus.unregister_all(self)
        self.selected_item = None
        self.selected_slot_index = None
        self.showing = False
        logger.debug("SelectionManager cleanup complete")

    def select_item(self, item: CatalogItem | None) -> None:
        """Select a catalog item.

        In assign-to-slot mode with a slot selected, the item is also assigned to
        that slot.
        """
        self.selected_item = item
        self.context.event_bus.publish(ItemSelectedEvent(item_id=item.id if item else None))

        if item is not None and self.mode is SelectionMode.ASSIGN_TO_SLOT and self.selected_slot_index is not None:
            self.context.hotbar_manager.assign(item, self.selected_slot_index)

    def select_slot(self, slot_index: int) -> None:
        """Activate a hotbar slot: select it, then select and place its item if any."""
        if not 0 <= slot_index < HOTBAR_SLOT_COUNT:
            logger.warning("Ignoring selection of hotbar slot index %s", slot_index)
            return

        self.selected_slot_index = slot_index
        self.context.event_bus.publish(SlotSelectedEvent(slot_index=slot_index))

        occupant = self.context.hotbar_manager.get_item(slot_index)
        if occupant is None:
            self.select_item(None)
            logger.debug("Hotbar slot %d is empty", slot_index + 1)
            return

        self.select_item(occupant)
        self.place_item(occupant)

    def set_mode(self, mode: SelectionMode) -> None:
        """Switch mode. Leaving assign-to-slot keeps the selected slot."""
        if mode is self.mode:
            return
        self.mode = mode
        logger.debug("Selection mode: %s", mode.name)
        self.context.event_bus.publish(SelectionModeChangedEvent(mode=mode))

    def toggle_mode(self) -> None:
        """Flip between browse and assign-to-slot."""
        if self.mode is SelectionMode.BROWSE:
            self.set_mode(SelectionMode.ASSIGN_TO_SLOT)
        else:
            self.set_mode(SelectionMode.BROWSE)

    def deselect(self) -> None:
        """Clear the selected item and slot without changing the mode."""
        self.selected_item = None
        self.selected_slot_index = None
        self.context.event_bus.publish(ItemSelectedEvent(item_id=None))

    def open(self) -> None:
        """Open the catalog browse view."""
        if self.showing:
            return
        self.showing = True
        self.context.event_bus.publish(CatalogOpenedEvent())

    def close(self) -> None:
        """Close the catalog browse view. Hotbar contents are untouched."""
        if not self.showing:
            return
        self.showing = False
        self.context.event_bus.publish(CatalogClosedEvent())

    def place_item(self, item: CatalogItem) -> str | None:
        """Place an item in the scene.

        Returns:
            The new entity id, or None if placement failed.
        """
        return self.context.scene_manager.place_in_scene(item)

    def confirm_selection(self) -> str | None:
        """Place the selected item and close the catalog view.

        Returns:
            The new entity id, or None if nothing was selected or placement failed.
        """
        if self.selected_item is None:
            return None
        entity_id = self.place_item(self.selected_item)
        self.close()
        return entity_id

    def on_key_press(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Handle the catalog keyboard surface."""
        if not self.showing or self.text_input_focused:
            return False

        if symbol in SLOT_KEYS:
            self.select_slot(SLOT_KEYS[symbol])
            return True
        if symbol in CLOSE_KEYS:
            self.close()
            return True
        if symbol == TOGGLE_MODE_KEY:
            self.toggle_mode()
            return True
        if symbol == DESELECT_KEY:
            self.deselect()
            return True
        return False

    def on_scene_click(self, button: int, entity_id: str | None = None) -> bool:
        """Left click places the selected slot's item; right click removes the clicked entity."""
        if button == arcade.MOUSE_BUTTON_LEFT:
            if self.selected_slot_index is None:
                return False
            item = self.context.hotbar_manager.get_item(self.selected_slot_index)
            if item is None:
                return False
            self.place_item(item)
            return True

        if button == arcade.MOUSE_BUTTON_RIGHT and entity_id is not None:
            return self.context.scene_manager.remove_from_scene(entity_id)

        return False

    def _on_tab_changed(self, event: Event) -> None:  # noqa: ARG002
        self.selected_item = None

    def _on_catalog_loaded(self, event: Event) -> None:  # noqa: ARG002
        self.selected_item = None

    def _on_item_removed(self, event: Event) -> None:
        item_id = cast("CatalogItemRemovedEvent", event).item_id
        if self.selected_item is not None and self.selected_item.id == item_id:
            self.selected_item = None
