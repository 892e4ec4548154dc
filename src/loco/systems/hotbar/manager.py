"""Hotbar: nine quick-access slots persisted by item id.

This module provides the HotbarManager class, which owns the fixed array of
hotbar slots. Each slot holds either nothing or a catalog item. Only item ids
are persisted: the record is a JSON list of exactly nine entries, each an id
string or null, stored under settings.HOTBAR_STORAGE_KEY.

Slot lifecycle:
- On setup the persisted ids are read back but not resolved. Until the first
  catalog load commits, the hotbar is *pending*: a slot with a stored id is not
  empty even though no item is available for it yet. This keeps a slow catalog
  from evicting slots the moment the host starts.
- When CatalogLoadedEvent arrives, every stored id is looked up in the fresh
  catalog. Ids that no longer resolve become empty silently. If the record holds
  the same id twice, the first slot keeps it and later ones become empty.
- A failed load (CatalogLoadFailedEvent) resolves nothing, so pending slots are
  never evicted by an outage.

Every mutation writes the record immediately. A storage failure is logged and the
in-memory slots remain authoritative for the rest of the session.

Example usage:
    hotbar = context.hotbar_manager

    hotbar.assign(item, 2)
    hotbar.assign(item, 5)  # slot 2 is vacated, an item occupies one slot only
    hotbar.get_item(5)      # -> item
    hotbar.is_slot_empty(2) # -> True
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, ClassVar, cast

from loco.conf import settings
from loco.constants import HOTBAR_SLOT_COUNT
from loco.storage import StorageError
from loco.systems.catalog.events import CatalogItemRemovedEvent, CatalogLoadedEvent
from loco.systems.hotbar.base import HotbarBaseManager
from loco.systems.hotbar.events import SlotAssignedEvent, SlotClearedEvent
from loco.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from loco.events import Event
    from loco.systems.catalog.base import CatalogItem
    from loco.systems.context import CatalogContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class HotbarManager(HotbarBaseManager):
    """Manages the nine hotbar slots and their persistence.

    Attributes:
        slot_ids: Stored item id per slot (None for an empty slot). Always nine entries.
        slots: Resolved item per slot. None for empty slots and, while pending, for
            slots whose id has not been resolved yet.
        pending: True until the first successful catalog load has been applied.
    """

    name: ClassVar[str] = "hotbar"
    dependencies: ClassVar[list[str]] = []

    def __init__(self) -> None:
        """Initialize nine empty, pending slots."""
        self.slot_ids: list[str | None] = [None] * HOTBAR_SLOT_COUNT
        self.slots: list[CatalogItem | None] = [None] * HOTBAR_SLOT_COUNT
        self.pending: bool = True

    def setup(self, context: CatalogContext) -> None:
        """Restore persisted slot ids and subscribe to catalog events."""
        self.context = context
        self.slot_ids = self._read_record()
        self.slots = [None] * HOTBAR_SLOT_COUNT
        self.pending = True

        context.event_bus.subscribe(CatalogLoadedEvent, self._on_catalog_loaded)
        context.event_bus.subscribe(CatalogItemRemovedEvent, self._on_item_removed)

        restored = sum(1 for slot_id in self.slot_ids if slot_id is not None)
        logger.debug("HotbarManager setup complete (%d slots restored, pending)", restored)

    def cleanup(self) -> None:
        """Unsubscribe from catalog events."""
        if hasattr(self, "context"):
            self.context.event_bus.unregister_all(self)
        logger.debug("HotbarManager cleanup complete")

    def assign(self, item: CatalogItem, slot_index: int) -> bool:
        """Place an item in a slot.

        If the item already sits in another slot, that slot is emptied in the same
        update. The previous occupant of the target slot becomes unassigned; it is not
        moved elsewhere.

        Args:
            item: Item to place.
            slot_index: Target slot (0-8).

        Returns:
            True if the slot changed, False for an out-of-range index or a no-op.
        """
        if not self._valid_index(slot_index):
            return False
        vacated = [i for i, slot_id in enumerate(self.slot_ids) if slot_id == item.id and i != slot_index]
        for index in vacated:
            self.slot_ids[index] = None
            self.slots[index] = None

        if self.slot_ids[slot_index] == item.id:
            # Refresh the reference in case this is a newer record for the same id
            self.slots[slot_index] = item
            if not vacated:
                return False
            self._write_record()
            for index in vacated:
                self.context.event_bus.publish(SlotClearedEvent(slot_index=index))
            return True

        self.slot_ids[slot_index] = item.id
        self.slots[slot_index] = item
        self._write_record()

        logger.info("Assigned %s to hotbar slot %d", item.file_name, slot_index + 1)
        for index in vacated:
            self.context.event_bus.publish(SlotClearedEvent(slot_index=index))
        self.context.event_bus.publish(SlotAssignedEvent(slot_index=slot_index, item_id=item.id))
        return True

    def add_item(self, item: CatalogItem, preferred_slot: int | None = None) -> int | None:
        """Put an item on the hotbar without the caller choosing a slot.

        Uses the preferred slot when given, otherwise the slot already holding the
        item, otherwise the first empty slot, otherwise slot 0.

        Returns:
            The slot the item ended up in, or None for an out-of-range preferred slot.
        """
        if preferred_slot is not None:
            if not self._valid_index(preferred_slot):
                return None
            self.assign(item, preferred_slot)
            return preferred_slot

        existing = self.find_slot(item.id)
        if existing is not None:
            return existing

        target = next((i for i in range(HOTBAR_SLOT_COUNT) if self.is_slot_empty(i)), 0)
        self.assign(item, target)
        return target

    def clear(self, slot_index: int) -> bool:
        """Empty a slot.

        Returns:
            True if the slot held something, False otherwise.
        """
        if not self._valid_index(slot_index):
            return False
        if self.slot_ids[slot_index] is None:
            return False

        self.slot_ids[slot_index] = None
        self.slots[slot_index] = None
        self._write_record()

        logger.info("Cleared hotbar slot %d", slot_index + 1)
        self.context.event_bus.publish(SlotClearedEvent(slot_index=slot_index))
        return True

    def resolve_against(self, catalog: list[CatalogItem]) -> None:
        """Re-derive each slot's item from a freshly loaded catalog.

        Slots whose stored id is missing from the catalog become empty. A duplicate id
        resolves in its first slot only. The cleaned record is written back.
        """
        by_id = {item.id: item for item in catalog}
        seen: set[str] = set()
        slot_ids: list[str | None] = [None] * HOTBAR_SLOT_COUNT
        slots: list[CatalogItem | None] = [None] * HOTBAR_SLOT_COUNT

        for index, slot_id in enumerate(self.slot_ids):
            if slot_id is None:
                continue
            if slot_id in seen:
                logger.warning("Hotbar id %s stored in more than one slot; keeping the first", slot_id)
                continue
            item = by_id.get(slot_id)
            if item is None:
                logger.debug("Hotbar slot %d refers to %s, which is no longer in the catalog", index + 1, slot_id)
                continue
            seen.add(slot_id)
            slot_ids[index] = slot_id
            slots[index] = item

        changed = slot_ids != self.slot_ids
        self.slot_ids = slot_ids
        self.slots = slots
        self.pending = False

        if changed:
            self._write_record()
        logger.debug("Hotbar resolved against %d catalog items", len(catalog))

    def get_item(self, slot_index: int) -> CatalogItem | None:
        """Get the item resolved for a slot, or None."""
        if not 0 <= slot_index < HOTBAR_SLOT_COUNT:
            return None
        return self.slots[slot_index]

    def get_slot_ids(self) -> list[str | None]:
        """Get a copy of the stored id per slot."""
        return list(self.slot_ids)

    def find_slot(self, item_id: str) -> int | None:
        """Get the slot holding an item id, or None."""
        try:
            return self.slot_ids.index(item_id)
        except ValueError:
            return None

    def is_pending(self, slot_index: int | None = None) -> bool:
        """Check whether slots are still waiting for the first catalog load.

        Args:
            slot_index: When given, only True if that slot holds an unresolved id.
        """
        if slot_index is None:
            return self.pending
        return self.pending and 0 <= slot_index < HOTBAR_SLOT_COUNT and self.slot_ids[slot_index] is not None

    def is_slot_empty(self, slot_index: int) -> bool:
        """Check whether a slot holds nothing.

        A pending slot with a stored id is not empty, even though get_item() returns
        None for it until the catalog has loaded.
        """
        if not 0 <= slot_index < HOTBAR_SLOT_COUNT:
            return True
        return self.slot_ids[slot_index] is None

    def _on_catalog_loaded(self, event: Event) -> None:
        self.resolve_against(cast("CatalogLoadedEvent", event).items)

    def _on_item_removed(self, event: Event) -> None:
        item_id = cast("CatalogItemRemovedEvent", event).item_id
        slot_index = self.find_slot(item_id)
        if slot_index is not None:
            self.clear(slot_index)

    def _valid_index(self, slot_index: int) -> bool:
        if 0 <= slot_index < HOTBAR_SLOT_COUNT:
            return True
        logger.warning("Ignoring hotbar slot index %s (valid range is 0-%d)", slot_index, HOTBAR_SLOT_COUNT - 1)
        return False

    def _read_record(self) -> list[str | None]:
        """Read the persisted id list. Any failure yields nine empty slots."""
        empty: list[str | None] = [None] * HOTBAR_SLOT_COUNT
        try:
            raw = self.context.storage.get(settings.HOTBAR_STORAGE_KEY)
        except StorageError:
            logger.exception("Failed to read hotbar record; starting with empty slots")
            return empty

        if raw is None:
            return empty

        try:
            record = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Malformed hotbar record; starting with empty slots")
            return empty

        if not isinstance(record, list):
            logger.warning("Hotbar record is not a list; starting with empty slots")
            return empty

        slot_ids = [entry if isinstance(entry, str) and entry else None for entry in record[:HOTBAR_SLOT_COUNT]]
        slot_ids.extend([None] * (HOTBAR_SLOT_COUNT - len(slot_ids)))
        return slot_ids

    def _write_record(self) -> None:
        """Persist the id list. Failures are logged; memory stays authoritative."""
        try:
            self.context.storage.set(settings.HOTBAR_STORAGE_KEY, json.dumps(self.slot_ids))
        except StorageError:
            logger.exception("Failed to persist hotbar slots; keeping them in memory only")
