"""Base classes for the catalog system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from loco.systems.base import BaseSystem

if TYPE_CHECKING:
    from loco.types import ItemKind, RawItemRecord


class SourceUnavailableError(Exception):
    """Raised by a catalog source that cannot deliver its item list."""


@dataclass
class CatalogItem:
    """A placeable image or 3D model in the catalog.

    Items are created fresh on every catalog load. The only field that changes
    after construction is thumbnail_url, which deduplication may fill in from a
    later duplicate record.

    Attributes:
        id: Stable identifier of the content unit, unique within a catalog snapshot.
        kind: Image or model.
        file_name: Display name; also the last-resort identity signal.
        url: Primary locator (disk path, content-addressed path or session-local locator).
        file_path: Optional secondary locator.
        thumbnail_url: Optional preview locator.
        file_size: Optional size in bytes, used only as an identity tie-break.
        category: Browsable category derived from the file name.
        created_at: Creation timestamp reported by the source, if any.
        modified_at: Modification timestamp reported by the source, if any.
    """

    id: str
    kind: ItemKind
    file_name: str
    url: str
    file_path: str | None = None
    thumbnail_url: str | None = None
    file_size: int | None = None
    category: str = ""
    created_at: str | None = None
    modified_at: str | None = None

    @classmethod
    def from_record(cls, record: RawItemRecord | dict[str, Any], kind: ItemKind) -> CatalogItem:
        """Create an item from a catalog-service record.

        Both "fileSize" and the desktop shell's "size" key are accepted.

        Raises:
            KeyError: If the record has no id or url.
        """
        file_size = record.get("fileSize")
        if file_size is None:
            file_size = record.get("size")
        return cls(
            id=str(record["id"]),
            kind=kind,
            file_name=record.get("fileName") or "Unknown",
            url=record["url"],
            file_path=record.get("filePath"),
            thumbnail_url=record.get("thumbnailUrl"),
            file_size=file_size,
            created_at=record.get("createdAt"),
            modified_at=record.get("modifiedAt"),
        )


class CatalogServicePort(ABC):
    """Disk-backed catalog service consumed by the catalog manager.

    Both listing calls return a dictionary shaped like
    ``{"success": bool, "images": [...]}`` / ``{"success": bool, "models": [...]}``.

    Attributes:
        supports_delete: Whether delete_file() actually removes files.
    """

    supports_delete: ClassVar[bool] = False

    @abstractmethod
    async def list_images_from_disk(self) -> dict[str, Any]:
        """List stored images."""
        ...

    @abstractmethod
    async def list_models_from_disk(self) -> dict[str, Any]:
        """List stored models."""
        ...

    async def delete_file(self, path: str) -> bool:  # noqa: ARG002
        """Delete a stored file. Services without deletion support return False."""
        return False


class CatalogBaseManager(BaseSystem, ABC):
    """Base class for CatalogManager."""

    role = "catalog_manager"

    @abstractmethod
    async def load_catalog(self) -> list[CatalogItem]:
        """Load, merge and deduplicate items from all sources."""
        ...

    @abstractmethod
    def get_items(self) -> list[CatalogItem]:
        """Get the current catalog."""
        ...

    @abstractmethod
    def get_item(self, item_id: str) -> CatalogItem | None:
        """Get a catalog item by id."""
        ...

    @abstractmethod
    def get_visible_items(self) -> list[CatalogItem]:
        """Get the catalog filtered by the active tab and search term."""
        ...

    @abstractmethod
    def set_active_tab(self, tab: str) -> None:
        """Switch the browsed category."""
        ...
