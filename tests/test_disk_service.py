"""Unit tests for DiskCatalogService."""

import asyncio
from pathlib import Path

import pytest

from loco.systems.catalog.base import SourceUnavailableError
from loco.systems.catalog.disk import DiskCatalogService


@pytest.fixture
def service(tmp_path: Path) -> DiskCatalogService:
    """Create a service over empty temporary catalog directories."""
    images_dir = tmp_path / "images"
    models_dir = tmp_path / "models"
    images_dir.mkdir()
    models_dir.mkdir()
    return DiskCatalogService(images_dir=images_dir, models_dir=models_dir)


def test_list_images(service: DiskCatalogService) -> None:
    """Test that stored images are listed with id, name and locators."""
    path = service.images_dir / "1234abcd-my-cat.png"
    path.write_bytes(b"png")
    (service.images_dir / "5678-notes.txt").write_text("ignored")

    result = asyncio.run(service.list_images_from_disk())

    assert result["success"] is True
    [record] = result["images"]
    assert record["id"] == "1234abcd"
    assert record["fileName"] == "my-cat.png"
    assert record["url"] == f"app-file://{path}"
    assert record["thumbnailUrl"] == record["url"]
    assert record["filePath"] == str(path)
    assert record["size"] == 3
    assert record["createdAt"]
    assert record["modifiedAt"]


def test_list_models_has_no_thumbnail(service: DiskCatalogService) -> None:
    """Test that model records carry no thumbnail."""
    (service.models_dir / "abcd-Chair.GLB").write_bytes(b"glb")

    result = asyncio.run(service.list_models_from_disk())

    [record] = result["models"]
    assert record["fileName"] == "Chair.GLB"
    assert "thumbnailUrl" not in record


def test_missing_directory_is_created(tmp_path: Path) -> None:
    """Test that a missing catalog directory is created and lists nothing."""
    service = DiskCatalogService(images_dir=tmp_path / "new-images", models_dir=tmp_path / "new-models")

    result = asyncio.run(service.list_images_from_disk())

    assert result == {"success": True, "images": []}
    assert (tmp_path / "new-images").is_dir()


def test_unreadable_directory_raises(tmp_path: Path) -> None:
    """Test that a directory that cannot be read raises SourceUnavailableError."""
    blocker = tmp_path / "images"
    blocker.write_text("a file, not a directory")
    service = DiskCatalogService(images_dir=blocker, models_dir=tmp_path / "models")

    with pytest.raises(SourceUnavailableError):
        asyncio.run(service.list_images_from_disk())


def test_delete_file(service: DiskCatalogService) -> None:
    """Test that a stored file is deleted given its app-file url."""
    path = service.images_dir / "1-a.png"
    path.write_bytes(b"x")

    assert asyncio.run(service.delete_file(f"app-file://{path}")) is True
    assert not path.exists()
    assert asyncio.run(service.delete_file(str(path))) is False


def test_delete_outside_catalog_is_refused(service: DiskCatalogService, tmp_path: Path) -> None:
    """Test that files outside the catalog directories are never deleted."""
    outsider = tmp_path / "precious.txt"
    outsider.write_text("keep me")

    assert asyncio.run(service.delete_file(str(outsider))) is False
    assert outsider.exists()


def test_defaults_come_from_settings(tmp_path: Path) -> None:
    """Test that directories default to the configured settings."""
    service = DiskCatalogService()

    assert service.images_dir == tmp_path / "images"
    assert service.models_dir == tmp_path / "models"
    assert ".glb" in service.model_extensions
