"""Events for the catalog system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loco.events import Event

if TYPE_CHECKING:
    from loco.systems.catalog.base import CatalogItem


@dataclass
class CatalogLoadedEvent(Event):
    """Fired when a catalog load commits its result.

    Published for complete and partial loads alike (a source that failed simply
    contributed no items). The hotbar resolves its persisted slots against
    these items.

    Attributes:
        items: The deduplicated catalog.
    """

    items: list[CatalogItem] = field(default_factory=list)


@dataclass
class CatalogLoadFailedEvent(Event):
    """Fired when aggregation failed unexpectedly and the catalog fell back to empty.

    Attributes:
        message: Displayable description of the failure.
    """

    message: str


@dataclass
class CatalogTabChangedEvent(Event):
    """Fired when the browsed category changes.

    Attributes:
        tab: The newly active tab.
    """

    tab: str


@dataclass
class CatalogItemRemovedEvent(Event):
    """Fired when an item is deleted from the catalog.

    Attributes:
        item_id: Id of the removed item.
    """

    item_id: str
