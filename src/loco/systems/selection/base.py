"""Base class for SelectionManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from loco.systems.base import BaseSystem

if TYPE_CHECKING:
    from loco.systems.catalog.base import CatalogItem
    from loco.types import SelectionMode


class SelectionBaseManager(BaseSystem, ABC):
    """Base class for SelectionManager."""

    role = "selection_manager"

    @abstractmethod
    def select_item(self, item: CatalogItem | None) -> None:
        """Select a catalog item."""
        ...

    @abstractmethod
    def select_slot(self, slot_index: int) -> None:
        """Activate a hotbar slot."""
        ...

    @abstractmethod
    def set_mode(self, mode: SelectionMode) -> None:
        """Switch between browse and assign-to-slot mode."""
        ...

    @abstractmethod
    def deselect(self) -> None:
        """Clear the selected item and slot."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the catalog browse view."""
        ...
