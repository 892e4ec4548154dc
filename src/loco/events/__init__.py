"""Module for events."""

from loco.events.base import Event, EventBus

__all__ = [
    "Event",
    "EventBus",
]
