"""Base class for HotbarManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from loco.systems.base import BaseSystem

if TYPE_CHECKING:
    from loco.systems.catalog.base import CatalogItem


class HotbarBaseManager(BaseSystem, ABC):
    """Base class for HotbarManager."""

    role = "hotbar_manager"

    @abstractmethod
    def assign(self, item: CatalogItem, slot_index: int) -> bool:
        """Place an item in a slot, vacating any other slot it occupied."""
        ...

    @abstractmethod
    def clear(self, slot_index: int) -> bool:
        """Empty a slot."""
        ...

    @abstractmethod
    def resolve_against(self, catalog: list[CatalogItem]) -> None:
        """Re-derive slot contents from a freshly loaded catalog."""
        ...

    @abstractmethod
    def get_item(self, slot_index: int) -> CatalogItem | None:
        """Get the item resolved for a slot."""
        ...

    @abstractmethod
    def is_slot_empty(self, slot_index: int) -> bool:
        """Check whether a slot holds nothing, not even a pending id."""
        ...
