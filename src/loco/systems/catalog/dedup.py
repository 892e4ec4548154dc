"""Deduplication of candidate catalog records.

Records arrive in source order (disk images, disk models, then scene-registry
items). The fold below walks them once: the earliest record with a given
identity wins, and later duplicates only contribute a thumbnail the winner
is missing. Identity is checked in order of strength:

1. normalized url
2. normalized file path
3. (file name, kind, file size)

Running the fold on its own output is a no-op.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from loco.systems.catalog.identity import identity_key_triple, normalize_path, normalize_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from loco.systems.catalog.base import CatalogItem

logger = logging.getLogger(__name__)


def deduplicate(candidates: Iterable[CatalogItem]) -> list[CatalogItem]:
    """Collapse duplicate records into one item per distinct content unit.

    Args:
        candidates: Records in tie-break order.

    Returns:
        Accepted items in the order they were first seen. Accepted items may have
        had their thumbnail_url filled in from a later duplicate.
    """
    accepted: list[CatalogItem] = []
    seen_ids: set[str] = set()
    by_url: dict[str, CatalogItem] = {}
    by_path: dict[str, CatalogItem] = {}
    by_triple: dict[tuple, CatalogItem] = {}

    for item in candidates:
        if item.id in seen_ids:
            continue
        seen_ids.add(item.id)

        url_key = normalize_url(item.url)
        path_key = normalize_path(item.file_path)
        triple_key = identity_key_triple(item)

        existing = (
            (by_url.get(url_key) if url_key else None)
            or (by_path.get(path_key) if path_key else None)
            or by_triple.get(triple_key)
        )
        if existing is not None:
            if not existing.thumbnail_url and item.thumbnail_url:
                existing.thumbnail_url = item.thumbnail_url
            logger.debug("Merged duplicate %s into %s", item.id, existing.id)
            continue

        accepted.append(item)
        if url_key:
            by_url[url_key] = item
        if path_key:
            by_path[path_key] = item
        by_triple.setdefault(triple_key, item)

    return accepted
