"""Base class for pluggable systems.

This module provides the abstract base class that all pluggable systems must inherit from.
Each system owns one concern of the catalog subsystem (catalog aggregation, hotbar slots,
selection, drag and drop, the scene boundary).

Example:
    Creating a custom system::

        from loco.systems.base import BaseSystem
        from loco.systems.registry import SystemRegistry

        @SystemRegistry.register
        class RecentItemsManager(BaseSystem):
            name = "recent"
            dependencies = ["scene"]

            def setup(self, context):
                self.recent = []
                context.event_bus.subscribe(ItemPlacedEvent, self._on_placed)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from loco.systems.context import CatalogContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    To create a custom system, subclass BaseSystem and implement setup(). Use the
    @SystemRegistry.register decorator to make the system available for loading.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        dependencies: List of system names this system depends on. Systems are
            set up in dependency order, so dependencies are available when setup()
            is called.
        role: Optional attribute name under which the context exposes the system
            (e.g. "hotbar_manager" makes it reachable as context.hotbar_manager).
    """

    name: ClassVar[str]

    # Systems are set up in dependency order
    dependencies: ClassVar[list[str]] = []

    role: ClassVar[str | None] = None

    @abstractmethod
    def setup(self, context: CatalogContext) -> None:
        """Initialize the system.

        Called after all systems have been instantiated and registered on the
        context. Use it to initialize state and subscribe to events.

        Args:
            context: Catalog context providing access to other systems via get_system().
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the host shuts the subsystem down.

        Override this method to release resources and unsubscribe from events.
        """

    def on_key_press(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Handle key press events.

        Args:
            symbol: Arcade key constant for the pressed key.
            modifiers: Bitfield of modifier keys held.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False

    def on_scene_click(self, button: int, entity_id: str | None = None) -> bool:  # noqa: ARG002
        """Handle a pointer click that landed on the live scene.

        Args:
            button: Arcade mouse button constant.
            entity_id: Entity under the pointer, as hit-tested by the renderer, if any.

        Returns:
            True if the click was handled and should stop propagating, False otherwise.
        """
        return False
