"""Default settings for Loco.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from loco.conf import global_settings

    STORAGE_DIR = "user_data"
    CATALOG_MODEL_EXTENSIONS = [*global_settings.CATALOG_MODEL_EXTENSIONS, ".fbx"]
"""

# Logging settings
LOG_LEVEL = "INFO"
"""Root log level used by setup_logging()."""

# Hotbar settings
HOTBAR_STORAGE_KEY = "loco-hotbar-items"
"""Key under which the hotbar slot ids are persisted."""

STORAGE_DIR = "storage"
"""Directory (relative to the working directory) holding key-value storage files."""

# Catalog settings
CATALOG_IMAGES_DIR = "catalog/images"
"""Directory scanned by DiskCatalogService for stored images."""

CATALOG_MODELS_DIR = "catalog/models"
"""Directory scanned by DiskCatalogService for stored 3D models."""

CATALOG_IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"]
"""File extensions recognised as images when scanning the images directory."""

CATALOG_MODEL_EXTENSIONS = [".glb", ".gltf", ".obj", ".fbx"]
"""File extensions recognised as models when scanning the models directory."""

CATALOG_INCLUDE_SCENE_ITEMS = True
"""Append items known to the live scene even when a disk catalog service is present."""

# Installed systems (like Django's INSTALLED_APPS)
INSTALLED_SYSTEMS = [
    "loco.systems.scene",
    "loco.systems.hotbar",
    "loco.systems.catalog",
    "loco.systems.selection",
    "loco.systems.dragdrop",
]
"""List of module paths to import for system registration.

Users can add custom systems by extending this list in their settings.py:

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.thumbnails",
    ]
"""
