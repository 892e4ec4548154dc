"""Identity signals used to decide whether two records describe the same content.

All functions are pure and total over optional string inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loco.systems.catalog.base import CatalogItem
    from loco.types import ItemKind


def normalize_url(url: str | None) -> str | None:
    """Normalize a locator for comparison.

    Backslashes become forward slashes and the result is lower-cased.

    Args:
        url: Locator string, possibly None or empty.

    Returns:
        The normalized locator, or None for empty input.

    Example:
        >>> normalize_url("C:\\\\Assets\\\\Cat.PNG")
        'c:/assets/cat.png'
    """
    if not url:
        return None
    return url.replace("\\", "/").lower()


def normalize_path(path: str | None) -> str | None:
    """Normalize a file path for comparison (same rules as normalize_url)."""
    return normalize_url(path)


def identity_key_triple(item: CatalogItem) -> tuple[str, ItemKind, int | None]:
    """Last-resort identity: file name, kind and file size.

    A missing size is part of the key, so two records that both lack a size
    compare equal on this signal.
    """
    return (item.file_name, item.kind, item.file_size)
