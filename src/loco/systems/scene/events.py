"""Events for the scene bridge."""

from dataclasses import dataclass

from loco.events import Event


@dataclass
class ItemPlacedEvent(Event):
    """Fired after the renderer instantiated a catalog item.

    The presentation layer typically shows an "Added <file name>" toast.

    Attributes:
        item_id: Catalog id of the placed item.
        file_name: Display name of the placed item.
        entity_id: Id the renderer assigned to the new entity.
    """

    item_id: str
    file_name: str
    entity_id: str


@dataclass
class ItemRemovedFromSceneEvent(Event):
    """Fired after a placed entity was removed from the scene.

    Attributes:
        entity_id: Id of the removed entity.
        item_id: Catalog id the entity was placed from, if known.
    """

    entity_id: str
    item_id: str | None = None
