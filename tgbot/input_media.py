"""The content of a media message to be sent."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class InputMediaType(enum.Enum):
    """Kinds of media that can be sent."""

    PHOTO = "photo"
    VIDEO = "video"
    ANIMATION = "animation"
    DOCUMENT = "document"
    AUDIO = "audio"


@dataclass
class InputMedia:
    """A media item: a file id, a URL or an ``attach://<name>`` reference."""

    type: InputMediaType
    media: str = ""
    thumb: str = ""
    caption: str = ""
    parse_mode: str = ""
    width: int = 0
    height: int = 0
    duration: int = 0
    performer: str = ""
    title: str = ""
    supports_streaming: bool = False