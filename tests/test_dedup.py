"""Unit tests for identity signals and catalog deduplication."""

import unittest

from loco.systems.catalog.base import CatalogItem
from loco.systems.catalog.dedup import deduplicate
from loco.systems.catalog.identity import identity_key_triple, normalize_path, normalize_url
from loco.types import ItemKind


def _item(item_id: str, url: str, **kwargs: object) -> CatalogItem:
    kwargs.setdefault("kind", ItemKind.IMAGE)
    kwargs.setdefault("file_name", f"{item_id}.png")
    return CatalogItem(id=item_id, url=url, **kwargs)  # type: ignore[arg-type]


class TestIdentity(unittest.TestCase):
    """Unit test class for identity signals."""

    def test_normalize_url_lowercases_and_uses_forward_slashes(self) -> None:
        """Test that normalization folds case and path separators."""
        assert normalize_url("C:\\Assets\\Cat.PNG") == "c:/assets/cat.png"

    def test_normalize_url_empty_is_none(self) -> None:
        """Test that empty and missing locators normalize to None."""
        assert normalize_url("") is None
        assert normalize_url(None) is None

    def test_normalize_path_matches_url_rules(self) -> None:
        """Test that paths use the same normalization as urls."""
        assert normalize_path("/Data/Models\\Chair.GLB") == "/data/models/chair.glb"

    def test_identity_key_triple(self) -> None:
        """Test that the triple is file name, kind and size."""
        item = _item("a", "/a.png", file_name="a.png", file_size=42)

        assert identity_key_triple(item) == ("a.png", ItemKind.IMAGE, 42)


class TestDeduplicate(unittest.TestCase):
    """Unit test class for deduplicate()."""

    def test_url_match_is_case_insensitive_and_enriches_thumbnail(self) -> None:
        """Test that a later record with the same url only contributes its thumbnail."""
        disk = _item("disk-1", "/a/Cat.PNG", file_path="/a/Cat.PNG", file_size=10)
        scene = _item("scene-1", "/a/cat.png", thumbnail_url="blob:thumb")

        result = deduplicate([disk, scene])

        assert len(result) == 1
        assert result[0].id == "disk-1"
        assert result[0].file_size == 10
        assert result[0].thumbnail_url == "blob:thumb"

    def test_existing_thumbnail_is_kept(self) -> None:
        """Test that enrichment never overwrites a thumbnail the winner already has."""
        first = _item("a", "/a.png", thumbnail_url="first-thumb")
        second = _item("b", "/A.png", thumbnail_url="second-thumb")

        result = deduplicate([first, second])

        assert result == [first]
        assert first.thumbnail_url == "first-thumb"

    def test_path_match(self) -> None:
        """Test that records with different urls but the same path are merged."""
        first = _item("a", "app-file:///x/a.png", file_path="/x/a.png")
        second = _item("b", "blob:123", file_path="/X/A.png")

        result = deduplicate([first, second])

        assert [item.id for item in result] == ["a"]

    def test_triple_match(self) -> None:
        """Test that name, kind and size identify content when locators differ."""
        first = _item("a", "/one/chair.glb", kind=ItemKind.MODEL, file_name="chair.glb", file_size=99)
        second = _item("b", "/two/chair.glb", kind=ItemKind.MODEL, file_name="chair.glb", file_size=99)

        result = deduplicate([first, second])

        assert [item.id for item in result] == ["a"]

    def test_triple_with_both_sizes_missing_matches(self) -> None:
        """Test that two records without a size compare equal on the triple."""
        first = _item("a", "/one/tree.png", file_name="tree.png")
        second = _item("b", "/two/tree.png", file_name="tree.png")

        assert len(deduplicate([first, second])) == 1

    def test_triple_differs_by_kind(self) -> None:
        """Test that an image and a model with the same name are distinct."""
        image = _item("a", "/one/thing", file_name="thing", kind=ItemKind.IMAGE)
        model = _item("b", "/two/thing", file_name="thing", kind=ItemKind.MODEL)

        assert len(deduplicate([image, model])) == 2

    def test_repeated_id_is_skipped(self) -> None:
        """Test that a record whose id was already seen is dropped."""
        first = _item("a", "/one.png")
        second = _item("a", "/two.png", file_name="other.png")

        result = deduplicate([first, second])

        assert result == [first]

    def test_earliest_record_wins(self) -> None:
        """Test that among duplicates the first record in input order is kept."""
        records = [
            _item("img", "/shared.png", file_name="shared.png"),
            _item("mdl", "/SHARED.png", file_name="shared.png"),
        ]

        assert deduplicate(records)[0].id == "img"
        assert deduplicate(list(reversed(records)))[0].id == "mdl"

    def test_distinct_items_keep_input_order(self) -> None:
        """Test that unrelated records are all accepted in order."""
        records = [_item("a", "/a.png"), _item("b", "/b.png"), _item("c", "/c.png")]

        assert [item.id for item in deduplicate(records)] == ["a", "b", "c"]

    def test_idempotent(self) -> None:
        """Test that deduplicating the output again changes nothing."""
        records = [
            _item("a", "/a.png", file_path="/a.png"),
            _item("b", "/A.PNG", thumbnail_url="t"),
            _item("c", "/c.png", file_name="c.png", file_size=3),
            _item("d", "/d.png", file_name="c.png", file_size=3),
            _item("e", "/e.png"),
        ]

        once = deduplicate(records)
        twice = deduplicate(once)

        assert [item.id for item in twice] == [item.id for item in once]
        assert [item.thumbnail_url for item in twice] == [item.thumbnail_url for item in once]

    def test_empty_input(self) -> None:
        """Test that no candidates yield no items."""
        assert deduplicate([]) == []
