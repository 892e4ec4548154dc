"""Settings for Loco.

Defaults live in loco.conf.global_settings. A host overrides them with an
upper-case module attribute in the module named by LOCO_SETTINGS_MODULE
(``settings`` when unset), or programmatically:

    from loco.conf import settings

    settings.configure(STORAGE_DIR="user_data", CATALOG_INCLUDE_SCENE_ITEMS=False)
    settings.STORAGE_DIR  # "user_data"
"""

from __future__ import annotations

import importlib
import os
from typing import Any

from loco.conf import global_settings


class Settings:
    """Attribute bag seeded with every upper-case default."""

    def __init__(self) -> None:
        """Copy the package defaults."""
        self.update(global_settings)

    def update(self, source: object) -> None:
        """Copy the upper-case attributes of a module onto this bag."""
        for name in dir(source):
            if name.isupper():
                setattr(self, name, getattr(source, name))


class LazySettings:
    """Proxy that builds the Settings on first attribute access.

    Assigning None to ``_wrapped`` discards the loaded values so the next access
    reloads them.
    """

    def __init__(self) -> None:
        """Start unloaded."""
        self._wrapped: Settings | None = None

    def _setup(self) -> Settings:
        wrapped = Settings()
        module_name = os.environ.get("LOCO_SETTINGS_MODULE", "settings")
        try:
            wrapped.update(importlib.import_module(module_name))
        except ImportError:
            # Defaults only
            pass
        self._wrapped = wrapped
        return wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Look a setting up, loading settings first if needed."""
        wrapped = self._wrapped or self._setup()
        return getattr(wrapped, name)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings on top of the defaults without importing a module."""
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
