"""Base classes and collaborator ports for the scene bridge."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loco.systems.base import BaseSystem

if TYPE_CHECKING:
    from collections.abc import Callable

    from loco.systems.catalog.base import CatalogItem


@dataclass
class Transform:
    """Desired pose for a placed entity.

    Attributes:
        position: World position (x, y, z).
        rotation: Euler rotation in radians (x, y, z).
        scale: Uniform scale factor.
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: float = 1.0


@dataclass
class SceneImage:
    """An image currently known to the live scene."""

    id: str
    src: str
    file_name: str | None = None


@dataclass
class SceneModel:
    """A 3D model currently known to the live scene."""

    id: str
    url: str
    file_name: str | None = None
    thumbnail_url: str | None = None


@dataclass
class SceneSnapshot:
    """Everything the scene registry currently knows, images and models in registry order."""

    images: list[SceneImage] = field(default_factory=list)
    models: list[SceneModel] = field(default_factory=list)


class SceneRendererPort(ABC):
    """Rendering collaborator that owns the actual 3D content."""

    @abstractmethod
    def instantiate(self, item: CatalogItem, transform: Transform | None = None) -> str:
        """Create an entity for the item and return its entity id.

        With no transform the renderer picks a position (e.g. in front of the camera,
        or at the hit-tested point of a scene drop).
        """
        ...

    @abstractmethod
    def destroy(self, entity_id: str) -> None:
        """Remove an entity from the scene."""
        ...

    def release_locator(self, locator: str) -> None:  # noqa: B027
        """Release resources held for a locator no placed entity uses any more."""


class SceneRegistryPort(ABC):
    """Registry of images and models known to the live scene."""

    @abstractmethod
    def subscribe(self, listener: Callable[[SceneSnapshot], None]) -> Callable[[], None]:
        """Register a listener for scene changes.

        The listener is called with the current snapshot immediately and again on every
        change. Returns a function that removes the listener.
        """
        ...


class SceneBaseManager(BaseSystem, ABC):
    """Base class for SceneBridgeManager."""

    role = "scene_manager"

    @abstractmethod
    def place_in_scene(self, item: CatalogItem, transform: Transform | None = None) -> str | None:
        """Ask the renderer to instantiate an item."""
        ...

    @abstractmethod
    def remove_from_scene(self, entity_id: str) -> bool:
        """Ask the renderer to remove a placed entity."""
        ...

    @abstractmethod
    def on_scene_items_changed(self, listener: Callable[[SceneSnapshot], None]) -> Callable[[], None]:
        """Subscribe to scene-registry changes."""
        ...

    @abstractmethod
    def get_entities_for(self, item: CatalogItem) -> list[str]:
        """Get the entities placed from an item."""
        ...
