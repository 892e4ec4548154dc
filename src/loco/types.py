"""Custom types and enumerations."""

from enum import Enum, auto
from typing import NotRequired, TypedDict


class ItemKind(Enum):
    """Kind of placeable content. Values are the wire names used in drag payloads."""

    IMAGE = "image"
    MODEL = "model"


class SelectionMode(Enum):
    """Whether selecting a catalog item only selects it or also assigns it to a slot."""

    BROWSE = auto()
    ASSIGN_TO_SLOT = auto()


class RawItemRecord(TypedDict):
    """Item record as returned by the disk catalog service."""

    id: str
    fileName: str
    url: str
    thumbnailUrl: NotRequired[str | None]
    filePath: NotRequired[str | None]
    fileSize: NotRequired[int | None]
    size: NotRequired[int | None]
    createdAt: NotRequired[str | None]
    modifiedAt: NotRequired[str | None]


class DragItemData(TypedDict):
    """The itemData block of a drag transfer payload."""

    id: str
    type: str
    url: str
    fileName: str
    thumbnailUrl: NotRequired[str | None]
    category: str
