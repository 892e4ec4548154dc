"""Loader that instantiates registered systems in dependency order."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from loco.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from loco.systems.base import BaseSystem
    from loco.systems.context import CatalogContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """Raised when a system depends on a system that is not registered."""


class CircularDependencyError(Exception):
    """Raised when system dependencies form a cycle."""


class SystemLoader:
    """Loads and manages system instances.

    The SystemLoader handles:
    1. Importing installed system modules to trigger registration
    2. Instantiating systems and registering them on the context
    3. Calling setup() in dependency order
    4. Fanning host input out to systems until one consumes it
    """

    def __init__(self, installed_systems: list[str]) -> None:
        """Initialize the system loader.

        Args:
            installed_systems: Module paths to import (usually settings.INSTALLED_SYSTEMS).
        """
        self.installed_systems = installed_systems
        self._instances: dict[str, BaseSystem] = {}
        self._load_order: list[str] = []

    def load_modules(self) -> None:
        """Import all configured system modules to trigger registration."""
        for module_path in self.installed_systems:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded system module: %s", module_path)
            except ImportError:
                logger.exception("Could not load system module '%s'", module_path)
                raise

    def instantiate_all(self, context: CatalogContext) -> dict[str, BaseSystem]:
        """Create, register and set up every registered system.

        Args:
            context: Context the systems are registered on.

        Returns:
            Dictionary mapping system names to their instances.

        Raises:
            MissingDependencyError: If a declared dependency is not registered.
            CircularDependencyError: If dependencies form a cycle.
        """
        self.load_modules()

        all_systems = SystemRegistry.get_all()
        if not all_systems:
            logger.warning("No systems registered")
            return {}

        self._load_order = self._resolve_order(all_systems)

        for name in self._load_order:
            system = all_systems[name]()
            self._instances[name] = system
            context.register_system(name, system)
            logger.debug("Instantiated system: %s", name)

        for name in self._load_order:
            self._instances[name].setup(context)

        logger.info("Loaded %d systems: %s", len(self._instances), ", ".join(self._load_order))
        return self._instances

    def on_key_press_all(self, symbol: int, modifiers: int) -> bool:
        """Offer a key press to each system in load order until one consumes it."""
        return any(self._instances[name].on_key_press(symbol, modifiers) for name in self._load_order)

    def on_scene_click_all(self, button: int, entity_id: str | None = None) -> bool:
        """Offer a scene click to each system in load order until one consumes it."""
        return any(self._instances[name].on_scene_click(button, entity_id) for name in self._load_order)

    def cleanup_all(self) -> None:
        """Clean up systems in reverse load order."""
        for name in reversed(self._load_order):
            self._instances[name].cleanup()
        logger.debug("Cleaned up all systems")

    def get_load_order(self) -> list[str]:
        """Get system names in the order they were set up."""
        return list(self._load_order)

    @staticmethod
    def _resolve_order(all_systems: dict[str, type[BaseSystem]]) -> list[str]:
        """Topologically sort systems so dependencies come first."""
        order: list[str] = []
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(name: str, chain: list[str]) -> None:
            if name in done:
                return
            if name in visiting:
                msg = f"Circular system dependency: {' -> '.join([*chain, name])}"
                raise CircularDependencyError(msg)
            system_class = all_systems.get(name)
            if system_class is None:
                msg = f"System '{chain[-1]}' depends on unknown system '{name}'"
                raise MissingDependencyError(msg)
            visiting.add(name)
            for dependency in system_class.dependencies:
                visit(dependency, [*chain, name])
            visiting.discard(name)
            done.add(name)
            order.append(name)

        for name in all_systems:
            visit(name, [])
        return order
