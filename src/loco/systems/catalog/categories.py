"""Category derivation and catalog filtering.

Categories come from substring checks against the lower-cased file name. Rules
are checked in order and the first match wins, so a file called
"car_texture.png" is a texture, not a vehicle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loco.types import ItemKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from loco.systems.catalog.base import CatalogItem

ALL_TAB = "all"
IMAGES_TAB = "images"
MODELS_TAB = "models"

BUILTIN_CATEGORIES = [ALL_TAB, IMAGES_TAB, MODELS_TAB]

IMAGE_CATEGORY_RULES: list[tuple[tuple[str, ...], str]] = [
    (("texture", "pattern"), "textures"),
    (("background", "bg"), "backgrounds"),
    (("icon",), "icons"),
]

MODEL_CATEGORY_RULES: list[tuple[tuple[str, ...], str]] = [
    (("character", "person"), "characters"),
    (("furniture", "chair", "table"), "furniture"),
    (("vehicle", "car"), "vehicles"),
]


def category_for(file_name: str, kind: ItemKind) -> str:
    """Derive the category of an item from its file name.

    Args:
        file_name: Display name of the item.
        kind: Image or model; selects the rule set and the fallback category.

    Returns:
        The first matching rule's category, or "images"/"models" when nothing matches.
    """
    lower_name = file_name.lower()
    if kind is ItemKind.IMAGE:
        rules, fallback = IMAGE_CATEGORY_RULES, IMAGES_TAB
    else:
        rules, fallback = MODEL_CATEGORY_RULES, MODELS_TAB

    for needles, category in rules:
        if any(needle in lower_name for needle in needles):
            return category
    return fallback


def category_set(items: Iterable[CatalogItem]) -> list[str]:
    """Build the list of browsable categories.

    "all", "images" and "models" always come first in that order; other categories
    follow in first-seen order.
    """
    categories = list(BUILTIN_CATEGORIES)
    for item in items:
        if item.category and item.category not in categories:
            categories.append(item.category)
    return categories


def filter_items(items: Iterable[CatalogItem], tab: str = ALL_TAB, search_term: str = "") -> list[CatalogItem]:
    """Filter items by browse tab and search term.

    Args:
        items: Catalog items in display order.
        tab: "all", "images", "models", or any derived category.
        search_term: Case-insensitive substring matched against file name and category.

    Returns:
        Matching items, order preserved.
    """
    if tab == IMAGES_TAB:
        result = [item for item in items if item.kind is ItemKind.IMAGE]
    elif tab == MODELS_TAB:
        result = [item for item in items if item.kind is ItemKind.MODEL]
    elif tab == ALL_TAB:
        result = list(items)
    else:
        result = [item for item in items if item.category == tab]

    needle = search_term.strip().lower()
    if needle:
        result = [item for item in result if needle in item.file_name.lower() or needle in item.category.lower()]

    return result
