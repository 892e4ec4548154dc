"""Catalog system: aggregation, deduplication and categorization of placeable items."""

from loco.systems.catalog.base import CatalogItem, CatalogServicePort, SourceUnavailableError
from loco.systems.catalog.categories import ALL_TAB, IMAGES_TAB, MODELS_TAB, category_for, category_set, filter_items
from loco.systems.catalog.dedup import deduplicate
from loco.systems.catalog.disk import DiskCatalogService
from loco.systems.catalog.events import (
    CatalogItemRemovedEvent,
    CatalogLoadedEvent,
    CatalogLoadFailedEvent,
    CatalogTabChangedEvent,
)
from loco.systems.catalog.identity import identity_key_triple, normalize_path, normalize_url
from loco.systems.catalog.manager import CatalogManager

__all__ = [
    "ALL_TAB",
    "IMAGES_TAB",
    "MODELS_TAB",
    "CatalogItem",
    "CatalogItemRemovedEvent",
    "CatalogLoadFailedEvent",
    "CatalogLoadedEvent",
    "CatalogManager",
    "CatalogServicePort",
    "CatalogTabChangedEvent",
    "DiskCatalogService",
    "SourceUnavailableError",
    "category_for",
    "category_set",
    "deduplicate",
    "filter_items",
    "identity_key_triple",
    "normalize_path",
    "normalize_url",
]
