"""Base classes and wire format for the drag-and-drop system.

A drag gesture carries a transfer payload so any drop target, including ones
outside this subsystem, can rebuild a placement request without querying the
catalog. The payload travels as two entries:

- "application/json": ``{"type": "inventory-item", "itemData": {...}}``
- "text/plain": the item's file name, for targets that cannot read JSON
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from loco.systems.base import BaseSystem
from loco.systems.catalog.base import CatalogItem
from loco.types import ItemKind

if TYPE_CHECKING:
    from loco.types import DragItemData

logger = logging.getLogger(__name__)

DRAG_PAYLOAD_TYPE = "inventory-item"
JSON_MIME_TYPE = "application/json"
TEXT_MIME_TYPE = "text/plain"


@dataclass
class DragState:
    """State of the drag gesture in progress.

    Attributes:
        dragged_item: Item captured at drag start, or None when no drag is active.
        hover_slot_index: Hotbar slot under the pointer, for highlighting only.
    """

    dragged_item: CatalogItem | None = None
    hover_slot_index: int | None = None

    def clear(self) -> None:
        """Forget the gesture."""
        self.dragged_item = None
        self.hover_slot_index = None


@dataclass
class DragPayload:
    """The item description carried by a drag gesture.

    Attributes:
        id: Item id.
        kind: Image or model.
        url: Primary locator.
        file_name: Display name.
        thumbnail_url: Preview locator, omitted from the wire format when None.
        category: Item category.
    """

    id: str
    kind: ItemKind
    url: str
    file_name: str
    thumbnail_url: str | None = None
    category: str = ""

    @classmethod
    def from_item(cls, item: CatalogItem) -> DragPayload:
        """Describe a catalog item."""
        return cls(
            id=item.id,
            kind=item.kind,
            url=item.url,
            file_name=item.file_name,
            thumbnail_url=item.thumbnail_url,
            category=item.category,
        )

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON payload."""
        item_data: DragItemData = {
            "id": self.id,
            "type": self.kind.value,
            "url": self.url,
            "fileName": self.file_name,
            "category": self.category,
        }
        if self.thumbnail_url is not None:
            item_data["thumbnailUrl"] = self.thumbnail_url
        return {"type": DRAG_PAYLOAD_TYPE, "itemData": item_data}

    def to_transfer_data(self) -> dict[str, str]:
        """Build both transfer entries for a drag gesture."""
        return {
            JSON_MIME_TYPE: json.dumps(self.to_dict()),
            TEXT_MIME_TYPE: self.file_name,
        }

    @classmethod
    def from_transfer_data(cls, transfer_data: dict[str, str] | None) -> DragPayload | None:
        """Parse the transfer entries of a drop.

        Returns:
            The payload, or None if the drop does not carry an inventory item (plain
            text only, foreign JSON, or a malformed payload).
        """
        if not transfer_data:
            return None
        raw = transfer_data.get(JSON_MIME_TYPE)
        if not raw:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Ignoring drop with invalid JSON payload")
            return None

        if not isinstance(data, dict) or data.get("type") != DRAG_PAYLOAD_TYPE:
            return None
        item_data = data.get("itemData")
        if not isinstance(item_data, dict):
            return None

        try:
            return cls(
                id=str(item_data["id"]),
                kind=ItemKind(item_data["type"]),
                url=item_data["url"],
                file_name=item_data.get("fileName") or "Unknown",
                thumbnail_url=item_data.get("thumbnailUrl"),
                category=item_data.get("category") or "",
            )
        except (KeyError, ValueError):
            logger.warning("Ignoring malformed inventory-item payload: %r", item_data)
            return None

    def to_item(self) -> CatalogItem:
        """Rebuild a catalog item from the payload alone."""
        return CatalogItem(
            id=self.id,
            kind=self.kind,
            file_name=self.file_name,
            url=self.url,
            thumbnail_url=self.thumbnail_url,
            category=self.category,
        )


class DragDropBaseManager(BaseSystem, ABC):
    """Base class for DragDropManager."""

    role = "dragdrop_manager"

    @abstractmethod
    def on_drag_start(self, item: CatalogItem) -> dict[str, str]:
        """Capture the dragged item and return its transfer data."""
        ...

    @abstractmethod
    def on_drop(self, slot_index: int, transfer_data: dict[str, str] | None = None) -> bool:
        """Drop onto a hotbar slot."""
        ...

    @abstractmethod
    def on_drag_end(self) -> None:
        """End the gesture, dropped or not."""
        ...
