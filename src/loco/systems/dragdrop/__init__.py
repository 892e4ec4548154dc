"""Drag-and-drop system: catalog items onto hotbar slots and into the scene."""

from loco.systems.dragdrop.base import (
    DRAG_PAYLOAD_TYPE,
    JSON_MIME_TYPE,
    TEXT_MIME_TYPE,
    DragDropBaseManager,
    DragPayload,
    DragState,
)
from loco.systems.dragdrop.manager import DragDropManager

__all__ = [
    "DRAG_PAYLOAD_TYPE",
    "JSON_MIME_TYPE",
    "TEXT_MIME_TYPE",
    "DragDropBaseManager",
    "DragDropManager",
    "DragPayload",
    "DragState",
]
