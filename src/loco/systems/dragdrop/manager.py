"""Drag and drop from the catalog onto hotbar slots and into the scene.

This module provides the DragDropManager class. A gesture goes through:

1. on_drag_start(item): the item is captured and its transfer data returned for
   the host to attach to the gesture.
2. on_drag_over(slot) / on_drag_leave(slot): hover highlighting only.
3. on_drop(slot) or on_scene_drop(...): the item is assigned to the slot or
   placed in the scene.
4. on_drag_end(): the gesture is forgotten, whether or not anything was dropped.

Drag state is independent of the catalog: a reload that completes mid-drag does
not clear it. At drop time the captured item is looked up again by id so the
freshest record is used. Drops coming from outside (no captured item) are
rebuilt from the transfer payload.

Example usage:
    dragdrop = context.dragdrop_manager

    transfer_data = dragdrop.on_drag_start(item)
    dragdrop.on_drag_over(0)
    dragdrop.on_drop(0, transfer_data)
    dragdrop.on_drag_end()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from loco.constants import HOTBAR_SLOT_COUNT
from loco.systems.dragdrop.base import DragDropBaseManager, DragPayload, DragState
from loco.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from loco.systems.catalog.base import CatalogItem
    from loco.systems.context import CatalogContext
    from loco.systems.scene.base import Transform

logger = logging.getLogger(__name__)


@SystemRegistry.register
class DragDropManager(DragDropBaseManager):
    """Coordinates drag gestures between the catalog, the hotbar and the scene.

    Attributes:
        state: The gesture in progress.
    """

    name: ClassVar[str] = "dragdrop"
    dependencies: ClassVar[list[str]] = ["hotbar", "catalog", "scene"]

    def __init__(self) -> None:
        """Initialize with no gesture in progress."""
        self.state = DragState()

    def setup(self, context: CatalogContext) -> None:
        """Bind to the context."""
        self.context = context
        logger.debug("DragDropManager setup complete")

    def cleanup(self) -> None:
        """Forget any gesture in progress."""
        self.state.clear()
        logger.debug("DragDropManager cleanup complete")

    @property
    def dragged_item(self) -> CatalogItem | None:
        """Item captured by the gesture in progress."""
        return self.state.dragged_item

    @property
    def hover_slot_index(self) -> int | None:
        """Hotbar slot currently hovered."""
        return self.state.hover_slot_index

    def on_drag_start(self, item: CatalogItem) -> dict[str, str]:
        """Capture an item and build the transfer data for the gesture.

        Returns:
            Mapping of mime type to value: the JSON payload and the plain-text file name.
        """
        self.state.dragged_item = item
        self.state.hover_slot_index = None
        logger.debug("Drag started: %s", item.file_name)
        return DragPayload.from_item(item).to_transfer_data()

    def on_drag_over(self, slot_index: int) -> None:
        """Highlight the hovered slot."""
        if 0 <= slot_index < HOTBAR_SLOT_COUNT:
            self.state.hover_slot_index = slot_index

    def on_drag_leave(self, slot_index: int) -> None:
        """Remove the highlight when the pointer leaves a slot."""
        if self.state.hover_slot_index == slot_index:
            self.state.hover_slot_index = None

    def on_drop(self, slot_index: int, transfer_data: dict[str, str] | None = None) -> bool:
        """Drop onto a hotbar slot.

        Args:
            slot_index: Target slot.
            transfer_data: Transfer entries of the gesture, used when no item was
                captured (the drag started outside this subsystem).

        Returns:
            True if the slot now holds the dropped item.
        """
        try:
            item = self._resolve_dropped_item(transfer_data)
            if item is None:
                logger.debug("Drop on slot %d carried no inventory item", slot_index + 1)
                return False

            hotbar = self.context.hotbar_manager
            hotbar.assign(item, slot_index)
            return hotbar.find_slot(item.id) == slot_index
        finally:
            self.state.clear()

    def on_scene_drop(self, transfer_data: dict[str, str] | None, transform: Transform | None = None) -> str | None:
        """Drop into the live scene, outside any slot.

        Args:
            transfer_data: Transfer entries of the gesture.
            transform: Pose hit-tested by the renderer, if any.

        Returns:
            The new entity id, or None if nothing was placed.
        """
        try:
            item = self._resolve_dropped_item(transfer_data)
            if item is None:
                return None
            return self.context.scene_manager.place_in_scene(item, transform)
        finally:
            self.state.clear()

    def on_drag_end(self) -> None:
        """End the gesture, whether or not it was dropped on a target."""
        self.state.clear()

    def _resolve_dropped_item(self, transfer_data: dict[str, str] | None) -> CatalogItem | None:
        catalog = self.context.catalog_manager
        dragged = self.state.dragged_item
        if dragged is not None:
            return catalog.get_item(dragged.id) or dragged

        payload = DragPayload.from_transfer_data(transfer_data)
        if payload is None:
            return None
        return catalog.get_item(payload.id) or payload.to_item()
