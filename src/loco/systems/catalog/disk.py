"""Disk-backed catalog service.

Stored files live in two directories, one for images and one for models. Each
file is saved as ``<uuid>-<original name>``; the uuid prefix is the item id and
the rest is the display name.

Directory scans are blocking filesystem calls, so they run in a worker thread
via asyncio.to_thread() and never stall the event loop.

Example usage:
    service = DiskCatalogService(
        images_dir=Path(settings.CATALOG_IMAGES_DIR),
        models_dir=Path(settings.CATALOG_MODELS_DIR),
    )
    context = create_catalog(renderer, catalog_service=service)
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, ClassVar

from loco.conf import settings
from loco.systems.catalog.base import CatalogServicePort, SourceUnavailableError

logger = logging.getLogger(__name__)

FILE_URL_SCHEME = "app-file://"


def _timestamp(seconds: float) -> str:
    return datetime.fromtimestamp(seconds, tz=UTC).isoformat()


class DiskCatalogService(CatalogServicePort):
    """Lists and deletes catalog files stored on the local disk.

    Attributes:
        images_dir: Directory holding stored images.
        models_dir: Directory holding stored models.
        image_extensions: Lower-case extensions recognised as images.
        model_extensions: Lower-case extensions recognised as models.
    """

    supports_delete: ClassVar[bool] = True

    def __init__(
        self,
        images_dir: Path | None = None,
        models_dir: Path | None = None,
        image_extensions: list[str] | None = None,
        model_extensions: list[str] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            images_dir: Images directory. Defaults to settings.CATALOG_IMAGES_DIR.
            models_dir: Models directory. Defaults to settings.CATALOG_MODELS_DIR.
            image_extensions: Defaults to settings.CATALOG_IMAGE_EXTENSIONS.
            model_extensions: Defaults to settings.CATALOG_MODEL_EXTENSIONS.
        """
        self.images_dir = Path(images_dir or settings.CATALOG_IMAGES_DIR)
        self.models_dir = Path(models_dir or settings.CATALOG_MODELS_DIR)
        self.image_extensions = {ext.lower() for ext in (image_extensions or settings.CATALOG_IMAGE_EXTENSIONS)}
        self.model_extensions = {ext.lower() for ext in (model_extensions or settings.CATALOG_MODEL_EXTENSIONS)}

    async def list_images_from_disk(self) -> dict[str, Any]:
        """List stored images.

        Raises:
            SourceUnavailableError: If the images directory cannot be read.
        """
        images = await asyncio.to_thread(self._scan, self.images_dir, self.image_extensions, with_thumbnail=True)
        return {"success": True, "images": images}

    async def list_models_from_disk(self) -> dict[str, Any]:
        """List stored models.

        Raises:
            SourceUnavailableError: If the models directory cannot be read.
        """
        models = await asyncio.to_thread(self._scan, self.models_dir, self.model_extensions, with_thumbnail=False)
        return {"success": True, "models": models}

    async def delete_file(self, path: str) -> bool:
        """Delete a stored file given its path or app-file url.

        Only files inside the images or models directory are deleted.

        Returns:
            True if the file was deleted, False if it was missing or outside the
            catalog directories.
        """
        return await asyncio.to_thread(self._delete, path)

    def _scan(self, directory: Path, extensions: set[str], *, with_thumbnail: bool) -> list[dict[str, Any]]:
        if not directory.exists():
            logger.info("Catalog directory %s does not exist, creating it", directory)
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                msg = f"Cannot create catalog directory {directory}"
                raise SourceUnavailableError(msg) from e
            return []

        try:
            paths = sorted(directory.iterdir())
        except OSError as e:
            msg = f"Cannot read catalog directory {directory}"
            raise SourceUnavailableError(msg) from e

        records: list[dict[str, Any]] = []
        for path in paths:
            if not path.is_file() or path.suffix.lower() not in extensions:
                continue
            try:
                stats = path.stat()
            except OSError:
                logger.warning("Skipping unreadable catalog file %s", path)
                continue

            item_id, _, original_name = path.name.partition("-")
            url = f"{FILE_URL_SCHEME}{path}"
            record: dict[str, Any] = {
                "id": item_id,
                "fileName": original_name or path.name,
                "url": url,
                "filePath": str(path),
                "size": stats.st_size,
                "createdAt": _timestamp(stats.st_ctime),
                "modifiedAt": _timestamp(stats.st_mtime),
            }
            if with_thumbnail:
                record["thumbnailUrl"] = url
            records.append(record)

        logger.debug("Found %d catalog files in %s", len(records), directory)
        return records

    def _delete(self, path: str) -> bool:
        target = Path(path.removeprefix(FILE_URL_SCHEME)).resolve()
        roots = (self.images_dir.resolve(), self.models_dir.resolve())
        if not any(target.is_relative_to(root) for root in roots):
            logger.warning("Refusing to delete %s outside the catalog directories", target)
            return False
        if not target.is_file():
            return False

        target.unlink()
        logger.info("Deleted catalog file %s", target)
        return True
