"""Loco - item catalog and hotbar manager for placing images and 3D models in a live scene.

This package provides:
- A catalog aggregated from a disk-backed service and the live scene, deduplicated
  and grouped into browsable categories
- A nine-slot hotbar persisted by item id
- Keyboard, pointer and drag-and-drop handling that assigns items to slots and
  places them in the scene through a renderer you provide

Quick start:
    from loco import DiskCatalogService, create_catalog

    context = create_catalog(my_renderer, my_scene_registry, DiskCatalogService())
    await context.catalog_manager.load_catalog()

Alternative usage:
    # Customize settings programmatically
    from loco.conf import settings

    settings.configure(
        STORAGE_DIR="user_data",
        CATALOG_INCLUDE_SCENE_ITEMS=False,
    )
"""

__version__ = "0.1.0"

from loco.conf import settings
from loco.helpers import create_catalog, setup_logging
from loco.storage import FileStorage, KeyValueStorage, MemoryStorage, StorageError
from loco.systems import (
    CatalogContext,
    CatalogItem,
    CatalogManager,
    CatalogServicePort,
    DiskCatalogService,
    DragDropManager,
    DragPayload,
    HotbarManager,
    SceneBridgeManager,
    SceneRegistryPort,
    SceneRendererPort,
    SceneSnapshot,
    SelectionManager,
    Transform,
)
from loco.types import ItemKind, SelectionMode

__all__ = [
    "CatalogContext",
    "CatalogItem",
    "CatalogManager",
    "CatalogServicePort",
    "DiskCatalogService",
    "DragDropManager",
    "DragPayload",
    "FileStorage",
    "HotbarManager",
    "ItemKind",
    "KeyValueStorage",
    "MemoryStorage",
    "SceneBridgeManager",
    "SceneRegistryPort",
    "SceneRendererPort",
    "SceneSnapshot",
    "SelectionManager",
    "SelectionMode",
    "StorageError",
    "Transform",
    "create_catalog",
    "setup_logging",
    "__version__",
    "settings",
]
