"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from loco.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def configure_test_settings(tmp_path: Path) -> Generator[None]:
    """Configure settings for each test.

    Storage and catalog directories point into the test's temporary directory so
    nothing is written to the working tree. Settings are reset after the test.

    Yields:
        None
    """
    settings.configure(
        LOG_LEVEL="DEBUG",
        HOTBAR_STORAGE_KEY="loco-hotbar-items",
        STORAGE_DIR=str(tmp_path / "storage"),
        CATALOG_IMAGES_DIR=str(tmp_path / "images"),
        CATALOG_MODELS_DIR=str(tmp_path / "models"),
        CATALOG_INCLUDE_SCENE_ITEMS=True,
    )
    yield
    # Reset settings after test
    settings._wrapped = None
