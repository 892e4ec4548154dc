"""Catalog aggregation for placeable images and 3D models.

This module provides the CatalogManager class, which builds one deduplicated,
categorized catalog from two independent sources of truth:

- the disk-backed catalog service (stored images and stored models), and
- the scene-item registry (images and models currently known to the live scene).

Whether a disk-backed service exists is decided once, by the host, when it builds
the CatalogContext. Without one, the scene registry is the only source. With one,
the scene registry still supplements it unless CATALOG_INCLUDE_SCENE_ITEMS is off.

A load cycle:
1. Fetch stored images and stored models concurrently. Each call is wrapped so a
   failure contributes zero items and is logged instead of aborting the other.
2. Buffer both results, then concatenate disk images, disk models and scene items.
   This order is the deduplication tie-break order, regardless of which fetch
   finished first.
3. Deduplicate, derive categories, commit, and publish CatalogLoadedEvent.

Loads can overlap (a reload requested while one is in flight). Each load captures a
reload token; only the newest load commits its result.

Example usage:
    catalog = context.catalog_manager
    await catalog.load_catalog()

    catalog.set_active_tab("textures")
    catalog.set_search_term("brick")
    for item in catalog.get_visible_items():
        grid.add(item)

    if catalog.error:
        grid.show_error(catalog.error)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, ClassVar

from loco.conf import settings
from loco.systems.catalog.base import CatalogBaseManager, CatalogItem
from loco.systems.catalog.categories import ALL_TAB, BUILTIN_CATEGORIES, category_for, category_set, filter_items
from loco.systems.catalog.dedup import deduplicate
from loco.systems.catalog.events import (
    CatalogItemRemovedEvent,
    CatalogLoadedEvent,
    CatalogLoadFailedEvent,
    CatalogTabChangedEvent,
)
from loco.systems.registry import SystemRegistry
from loco.systems.scene.base import SceneSnapshot
from loco.types import ItemKind

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from loco.systems.catalog.base import CatalogServicePort
    from loco.systems.context import CatalogContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class CatalogManager(CatalogBaseManager):
    """Aggregates, deduplicates and filters the item catalog.

    Nothing here raises to the host: a source that fails contributes no items, and
    an unexpected failure during aggregation leaves an empty catalog with `error`
    set for display.

    Attributes:
        items: Current deduplicated catalog, in tie-break order.
        categories: Browsable categories; "all", "images", "models" always first.
        loading: True while the newest load is in flight.
        error: Displayable message from the last failed load, or None.
        active_tab: Category currently browsed.
        search_term: Current search filter.
        catalog_service: Disk-backed service, or None when the host has none.
    """

    name: ClassVar[str] = "catalog"
    dependencies: ClassVar[list[str]] = ["scene"]

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self.items: list[CatalogItem] = []
        self.categories: list[str] = list(BUILTIN_CATEGORIES)
        self.loading: bool = False
        self.error: str | None = None
        self.active_tab: str = ALL_TAB
        self.search_term: str = ""
        self.catalog_service: CatalogServicePort | None = None

        self._reload_token: int = 0
        self._scene_snapshot = SceneSnapshot()

    def setup(self, context: CatalogContext) -> None:
        """Resolve the catalog sources and start listening to the scene registry."""
        self.context = context
        self.catalog_service = context.catalog_service

        if self.catalog_service is None:
            logger.info("No disk catalog service available; using scene items only")

        context.scene_manager.on_scene_items_changed(self._on_scene_items_changed)
        logger.debug("CatalogManager setup complete")

    def cleanup(self) -> None:
        """Forget the loaded catalog."""
        self.items = []
        self.categories = list(BUILTIN_CATEGORIES)
        self._scene_snapshot = SceneSnapshot()
        logger.debug("CatalogManager cleanup complete")

    async def load_catalog(self) -> list[CatalogItem]:
        """Load, merge and deduplicate items from all sources.

        Returns:
            The deduplicated catalog produced by this call. If a newer load was started
            meanwhile, the result is returned but not committed.
        """
        self._reload_token += 1
        token = self._reload_token
        self.loading = True

        try:
            candidates = await self._gather_candidates()
            items = deduplicate(candidates)
            categories = category_set(items)
        except Exception as e:
            logger.exception("Catalog load failed; falling back to an empty catalog")
            if token == self._reload_token:
                self.items = []
                self.categories = list(BUILTIN_CATEGORIES)
                self.error = str(e) or type(e).__name__
                self.loading = False
                self.context.event_bus.publish(CatalogLoadFailedEvent(message=self.error))
            return []

        if token != self._reload_token:
            logger.debug("Discarding stale catalog load %d (newest is %d)", token, self._reload_token)
            return items

        self.items = items
        self.categories = categories
        self.error = None
        self.loading = False
        logger.info("Catalog loaded: %d items from %d candidates", len(items), len(candidates))

        self.context.event_bus.publish(CatalogLoadedEvent(items=list(items)))
        return items

    async def _gather_candidates(self) -> list[CatalogItem]:
        """Collect candidate records from every source in tie-break order."""
        candidates: list[CatalogItem] = []
        service = self.catalog_service

        if service is not None:
            # gather() keeps argument order, so images always precede models
            image_items, model_items = await asyncio.gather(
                self._fetch_from_service(service.list_images_from_disk, "images", ItemKind.IMAGE),
                self._fetch_from_service(service.list_models_from_disk, "models", ItemKind.MODEL),
            )
            candidates.extend(image_items)
            candidates.extend(model_items)

        if service is None or settings.CATALOG_INCLUDE_SCENE_ITEMS:
            candidates.extend(self._items_from_scene(self._scene_snapshot))

        return candidates

    async def _fetch_from_service(
        self,
        call: Callable[[], Awaitable[dict[str, Any]]],
        key: str,
        kind: ItemKind,
    ) -> list[CatalogItem]:
        """Run one catalog-service call, turning any failure into an empty list."""
        try:
            result = await call()
        except Exception:
            logger.exception("Error loading %s from disk; continuing without them", key)
            return []

        if not isinstance(result, dict):
            logger.warning("Catalog service returned %r for %s; continuing without them", type(result).__name__, key)
            return []
        if not result.get("success"):
            logger.warning("Catalog service could not list %s: %s", key, result.get("error", "unknown error"))
            return []

        items: list[CatalogItem] = []
        for record in result.get(key) or []:
            try:
                item = CatalogItem.from_record(record, kind)
            except (KeyError, TypeError, AttributeError):
                logger.warning("Skipping malformed %s record: %r", key, record)
                continue
            item.category = category_for(item.file_name, kind)
            items.append(item)

        logger.debug("Catalog service listed %d %s", len(items), key)
        return items

    @staticmethod
    def _items_from_scene(snapshot: SceneSnapshot) -> list[CatalogItem]:
        """Synthesize catalog items from scene-registry records.

        Scene records carry no file path or size, so these items can only be matched
        against disk records by url or by file name.
        """
        items: list[CatalogItem] = []
        for image in snapshot.images:
            file_name = image.file_name or "Unknown"
            items.append(
                CatalogItem(
                    id=image.id,
                    kind=ItemKind.IMAGE,
                    file_name=file_name,
                    url=image.src,
                    thumbnail_url=image.src,
                    category=category_for(file_name, ItemKind.IMAGE),
                ),
            )
        for model in snapshot.models:
            file_name = model.file_name or "Unknown"
            items.append(
                CatalogItem(
                    id=model.id,
                    kind=ItemKind.MODEL,
                    file_name=file_name,
                    url=model.url,
                    thumbnail_url=model.thumbnail_url,
                    category=category_for(file_name, ItemKind.MODEL),
                ),
            )
        return items

    def _on_scene_items_changed(self, snapshot: SceneSnapshot) -> None:
        """Keep the latest scene snapshot for the next load."""
        self._scene_snapshot = snapshot
        logger.debug("Scene registry now holds %d images, %d models", len(snapshot.images), len(snapshot.models))

    def get_items(self) -> list[CatalogItem]:
        """Get the current catalog."""
        return list(self.items)

    def get_item(self, item_id: str) -> CatalogItem | None:
        """Get a catalog item by id."""
        return next((item for item in self.items if item.id == item_id), None)

    def get_visible_items(self) -> list[CatalogItem]:
        """Get the catalog filtered by the active tab and search term."""
        return filter_items(self.items, self.active_tab, self.search_term)

    def set_active_tab(self, tab: str) -> None:
        """Switch the browsed category.

        Publishes CatalogTabChangedEvent only when the tab actually changes; the
        selection system clears the selected item in response.
        """
        if tab == self.active_tab:
            return
        self.active_tab = tab
        logger.debug("Active catalog tab: %s", tab)
        self.context.event_bus.publish(CatalogTabChangedEvent(tab=tab))

    def set_search_term(self, search_term: str) -> None:
        """Set the search filter."""
        self.search_term = search_term

    async def remove_item(self, item_id: str) -> bool:
        """Delete an item from the catalog.

        Removes every entity placed from the item, drops it from the catalog,
        publishes CatalogItemRemovedEvent (the hotbar and selection react to it), and
        asks the catalog service to delete the backing files when it can.

        Returns:
            True if the item existed and was removed.
        """
        item = self.get_item(item_id)
        if item is None:
            logger.warning("Attempted to remove unknown catalog item: %s", item_id)
            return False

        scene_manager = self.context.scene_manager
        for entity_id in scene_manager.get_entities_for(item):
            scene_manager.remove_from_scene(entity_id)

        self.items = [existing for existing in self.items if existing.id != item_id]
        self.categories = category_set(self.items)
        logger.info("Removed %s from catalog", item.file_name)
        self.context.event_bus.publish(CatalogItemRemovedEvent(item_id=item_id))

        service = self.catalog_service
        if service is not None and service.supports_delete:
            paths = dict.fromkeys(path for path in (item.file_path, item.url, item.thumbnail_url) if path)
            for path in paths:
                try:
                    if not await service.delete_file(path):
                        logger.warning("Catalog service did not delete %s", path)
                except Exception:
                    logger.exception("Failed to delete %s", path)

        return True
