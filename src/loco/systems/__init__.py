"""Pluggable systems of the catalog subsystem."""

from loco.systems.base import BaseSystem
from loco.systems.catalog import CatalogItem, CatalogManager, CatalogServicePort, DiskCatalogService
from loco.systems.context import CatalogContext
from loco.systems.dragdrop import DragDropManager, DragPayload, DragState
from loco.systems.hotbar import HotbarManager
from loco.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from loco.systems.registry import SystemRegistry
from loco.systems.scene import SceneBridgeManager, SceneRegistryPort, SceneRendererPort, SceneSnapshot, Transform
from loco.systems.selection import SelectionManager

__all__ = [
    "BaseSystem",
    "CatalogContext",
    "CatalogItem",
    "CatalogManager",
    "CatalogServicePort",
    "CircularDependencyError",
    "DiskCatalogService",
    "DragDropManager",
    "DragPayload",
    "DragState",
    "HotbarManager",
    "MissingDependencyError",
    "SceneBridgeManager",
    "SceneRegistryPort",
    "SceneRendererPort",
    "SceneSnapshot",
    "SelectionManager",
    "SystemLoader",
    "SystemRegistry",
    "Transform",
]
