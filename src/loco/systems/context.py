"""Catalog context shared by all systems.

The CatalogContext is the registry and collaborator container handed to every
system's setup(). It holds:
- The event bus used for decoupled notifications
- The durable key-value storage used for hotbar persistence
- The external collaborators (scene renderer, scene registry, optional disk
  catalog service), resolved once by the host at construction time
- All registered systems, reachable by name via get_system() or by role
  attribute (context.hotbar_manager, context.catalog_manager, ...)

Example usage:
    context = CatalogContext(
        event_bus=EventBus(),
        storage=FileStorage(Path("storage")),
        scene_renderer=renderer,
        scene_registry=registry,
        catalog_service=DiskCatalogService(images_dir, models_dir),
    )
    SystemLoader(settings.INSTALLED_SYSTEMS).instantiate_all(context)

    hotbar = context.hotbar_manager
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loco.events import EventBus
    from loco.storage import KeyValueStorage
    from loco.systems.base import BaseSystem
    from loco.systems.catalog.base import CatalogBaseManager, CatalogServicePort
    from loco.systems.dragdrop.base import DragDropBaseManager
    from loco.systems.hotbar.base import HotbarBaseManager
    from loco.systems.loader import SystemLoader
    from loco.systems.scene.base import SceneBaseManager, SceneRegistryPort, SceneRendererPort
    from loco.systems.selection.base import SelectionBaseManager


class CatalogContext:
    """Central context object providing access to all catalog systems.

    Systems are accessed by name using get_system(), which returns the system or None
    if not registered, so individual systems can be swapped for test doubles.

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        storage: Durable key-value storage for hotbar persistence.
        scene_renderer: Rendering collaborator that instantiates and destroys placed entities.
        scene_registry: Registry of images and models currently known to the live scene.
        catalog_service: Disk-backed catalog service, or None when the host has none.
        system_loader: Loader that set up the systems; used to dispatch host input.
    """

    scene_manager: SceneBaseManager
    hotbar_manager: HotbarBaseManager
    catalog_manager: CatalogBaseManager
    selection_manager: SelectionBaseManager
    dragdrop_manager: DragDropBaseManager

    def __init__(
        self,
        event_bus: EventBus,
        storage: KeyValueStorage,
        scene_renderer: SceneRendererPort,
        scene_registry: SceneRegistryPort | None = None,
        catalog_service: CatalogServicePort | None = None,
    ) -> None:
        """Initialize the context with its collaborators.

        Systems are registered separately via register_system(), typically by the
        SystemLoader.

        Args:
            event_bus: Central event bus.
            storage: Key-value storage for persisted state.
            scene_renderer: Rendering collaborator.
            scene_registry: Scene-item registry, used as the catalog fallback source.
            catalog_service: Disk-backed catalog service. Passing None selects the
                            fallback path for the whole session.
        """
        self.event_bus = event_bus
        self.storage = storage
        self.scene_renderer = scene_renderer
        self.scene_registry = scene_registry
        self.catalog_service = catalog_service
        self.system_loader: SystemLoader | None = None

        self._systems: dict[str, BaseSystem] = {}

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a pluggable system with the context.

        Args:
            name: Unique identifier for the system (e.g., "hotbar", "catalog").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None if not registered."""
        return self._systems.get(name)

    def dispatch_key_press(self, symbol: int, modifiers: int) -> bool:
        """Forward a host key press to the systems.

        Returns:
            True if a system consumed the key.
        """
        if self.system_loader is None:
            return False
        return self.system_loader.on_key_press_all(symbol, modifiers)

    def dispatch_scene_click(self, button: int, entity_id: str | None = None) -> bool:
        """Forward a pointer click on the live scene to the systems.

        Returns:
            True if a system consumed the click.
        """
        if self.system_loader is None:
            return False
        return self.system_loader.on_scene_click_all(button, entity_id)
