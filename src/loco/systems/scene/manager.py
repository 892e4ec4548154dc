"""Scene bridge: the only path from the catalog subsystem to the renderer.

The bridge exposes two outward calls, place_in_scene() and remove_from_scene(),
and one inward call, on_scene_items_changed(), which the catalog uses to read
the scene registry when it needs fallback items.

Every placed entity is recorded with the catalog item it came from and the
locator it holds. Locators are leased through LocatorLeases so the renderer is
told to release a locator as soon as the last entity using it is removed.

Example usage:
    bridge = context.scene_manager
    entity_id = bridge.place_in_scene(item, Transform(position=(0.0, 1.5, -2.0)))
    ...
    bridge.remove_from_scene(entity_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from loco.systems.catalog.identity import normalize_url
from loco.systems.registry import SystemRegistry
from loco.systems.scene.base import SceneBaseManager
from loco.systems.scene.events import ItemPlacedEvent, ItemRemovedFromSceneEvent
from loco.systems.scene.locators import LocatorLeases

if TYPE_CHECKING:
    from collections.abc import Callable

    from loco.systems.catalog.base import CatalogItem
    from loco.systems.context import CatalogContext
    from loco.systems.scene.base import SceneSnapshot, Transform

logger = logging.getLogger(__name__)


@SystemRegistry.register
class SceneBridgeManager(SceneBaseManager):
    """Mediates placement and removal of catalog items in the live scene.

    Attributes:
        placed: Mapping of entity id to the catalog item id it was placed from.
        leases: Locator ownership map for placed entities.
    """

    name: ClassVar[str] = "scene"
    dependencies: ClassVar[list[str]] = []

    def __init__(self) -> None:
        """Initialize the bridge with no placed entities."""
        self.placed: dict[str, str] = {}
        self.leases = LocatorLeases()
        self._unsubscribers: list[Callable[[], None]] = []

    def setup(self, context: CatalogContext) -> None:
        """Bind the bridge to the context's renderer and registry."""
        self.context = context
        logger.debug("SceneBridgeManager setup complete")

    def cleanup(self) -> None:
        """Drop scene-registry subscriptions and placement bookkeeping."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.placed.clear()
        self.leases.clear()
        logger.debug("SceneBridgeManager cleanup complete")

    def place_in_scene(self, item: CatalogItem, transform: Transform | None = None) -> str | None:
        """Ask the renderer to instantiate a catalog item.

        Args:
            item: The item to place.
            transform: Desired pose; None lets the renderer choose.

        Returns:
            The new entity id, or None if the renderer failed.
        """
        try:
            entity_id = self.context.scene_renderer.instantiate(item, transform)
        except Exception:
            logger.exception("Renderer failed to place %s", item.file_name)
            return None

        self.placed[entity_id] = item.id
        self.leases.acquire(item.url, entity_id)
        logger.info("Placed %s as entity %s", item.file_name, entity_id)

        self.context.event_bus.publish(ItemPlacedEvent(item_id=item.id, file_name=item.file_name, entity_id=entity_id))
        return entity_id

    def remove_from_scene(self, entity_id: str) -> bool:
        """Ask the renderer to remove an entity.

        Entities not placed through the bridge can be removed too; they simply have no
        lease to release.

        Returns:
            True if the renderer removed the entity, False if it failed.
        """
        try:
            self.context.scene_renderer.destroy(entity_id)
        except Exception:
            logger.exception("Renderer failed to remove entity %s", entity_id)
            return False

        item_id = self.placed.pop(entity_id, None)
        locator = self.leases.release(entity_id)
        if locator is not None:
            try:
                self.context.scene_renderer.release_locator(locator)
            except Exception:
                logger.exception("Renderer failed to release locator %s", locator)

        logger.info("Removed entity %s", entity_id)
        self.context.event_bus.publish(ItemRemovedFromSceneEvent(entity_id=entity_id, item_id=item_id))
        return True

    def on_scene_items_changed(self, listener: Callable[[SceneSnapshot], None]) -> Callable[[], None]:
        """Subscribe to the scene registry.

        Returns:
            A function that removes the subscription. When the host has no scene
            registry the listener is never called.
        """
        registry = self.context.scene_registry
        if registry is None:
            logger.debug("No scene registry configured; scene listener ignored")
            return lambda: None

        unsubscribe = registry.subscribe(listener)
        self._unsubscribers.append(unsubscribe)
        return unsubscribe

    def get_entities_for(self, item: CatalogItem) -> list[str]:
        """Get entities placed from an item, matched by item id or by locator.

        Matching by locator also finds clones placed from a duplicate record that
        deduplication merged into this item.
        """
        locators = {normalize_url(item.url), normalize_url(item.file_path)} - {None}
        return [
            entity_id
            for entity_id, item_id in self.placed.items()
            if item_id == item.id or normalize_url(self.leases.locator_of(entity_id)) in locators
        ]
