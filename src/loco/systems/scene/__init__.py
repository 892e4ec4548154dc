"""Scene bridge system: the boundary to the rendering collaborator."""

from loco.systems.scene.base import (
    SceneImage,
    SceneModel,
    SceneRegistryPort,
    SceneRendererPort,
    SceneSnapshot,
    Transform,
)
from loco.systems.scene.events import ItemPlacedEvent, ItemRemovedFromSceneEvent
from loco.systems.scene.locators import LocatorLeases
from loco.systems.scene.manager import SceneBridgeManager

__all__ = [
    "ItemPlacedEvent",
    "ItemRemovedFromSceneEvent",
    "LocatorLeases",
    "SceneBridgeManager",
    "SceneImage",
    "SceneModel",
    "SceneRegistryPort",
    "SceneRendererPort",
    "SceneSnapshot",
    "Transform",
]
