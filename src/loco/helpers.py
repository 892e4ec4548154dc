"""Helper functions for wiring the catalog subsystem into a host.

This module provides high-level functions to simplify setup. Most hosts only need
create_catalog(); setup_logging() is exposed for hosts that build the context
themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from loco.conf import settings
from loco.events import EventBus
from loco.storage import FileStorage
from loco.systems.context import CatalogContext
from loco.systems.loader import SystemLoader

if TYPE_CHECKING:
    from loco.storage import KeyValueStorage
    from loco.systems.catalog.base import CatalogServicePort
    from loco.systems.scene.base import SceneRegistryPort, SceneRendererPort


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging for the host.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_catalog(
    scene_renderer: SceneRendererPort,
    scene_registry: SceneRegistryPort | None = None,
    catalog_service: CatalogServicePort | None = None,
    storage: KeyValueStorage | None = None,
) -> CatalogContext:
    """Create a fully set up catalog context.

    Builds the event bus and storage, then loads every system listed in
    settings.INSTALLED_SYSTEMS and sets them up in dependency order. The catalog is
    not loaded yet; await context.catalog_manager.load_catalog() once the host's
    event loop is running.

    Args:
        scene_renderer: Rendering collaborator that places and removes entities.
        scene_registry: Registry of images and models known to the live scene.
        catalog_service: Disk-backed catalog service. None means scene items are
                        the only catalog source for the whole session.
        storage: Storage for the hotbar record. Defaults to a FileStorage in
                settings.STORAGE_DIR.

    Returns:
        The context, with every system reachable by role (context.hotbar_manager, ...).

    Side effects:
        - Configures logging via setup_logging()
        - Reads the persisted hotbar record

    Example:
        >>> from loco import create_catalog
        >>> context = create_catalog(renderer, registry, DiskCatalogService())
        >>> await context.catalog_manager.load_catalog()
        >>> context.dispatch_key_press(arcade.key.KEY_1, 0)
    """
    setup_logging(settings.LOG_LEVEL)

    if storage is None:
        storage = FileStorage(Path(settings.STORAGE_DIR))

    context = CatalogContext(
        event_bus=EventBus(),
        storage=storage,
        scene_renderer=scene_renderer,
        scene_registry=scene_registry,
        catalog_service=catalog_service,
    )
    context.system_loader = SystemLoader(settings.INSTALLED_SYSTEMS)
    context.system_loader.instantiate_all(context)
    return context
