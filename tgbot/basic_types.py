"""Plain data objects of the bot API: users, files, media and stickers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PhotoSize:
    """One size of a photo or of a file or sticker thumbnail."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    file_size: int = 0


@dataclass
class Animation:
    """An animation file shown in a message that contains a game."""

    file_id: str = ""
    thumb: PhotoSize | None = None
    file_name: str = ""
    mime_type: str = ""
    file_size: int = 0


@dataclass
class Audio:
    """An audio file."""

    file_id: str = ""
    duration: int = 0
    performer: str = ""
    title: str = ""
    mime_type: str = ""
    file_size: int = 0
    thumb: PhotoSize | None = None


@dataclass
class BotCommand:
    """A bot command and its description."""

    command: str = ""
    description: str = ""


@dataclass
class User:
    """A user or a bot."""

    id: int = 0
    is_bot: bool = False
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    language_code: str = ""


@dataclass
class Contact:
    """A phone contact."""

    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    user_id: int = 0
    vcard: str = ""


@dataclass
class File:
    """A file ready to be downloaded by its ``file_path``."""

    file_id: str = ""
    file_size: int = 0
    file_path: str = ""


@dataclass
class Location:
    """A point on the map."""

    longitude: float = 0.0
    latitude: float = 0.0


@dataclass
class MaskPosition:
    """Where on a face a mask is placed by default."""

    point: str = ""
    x_shift: float = 0.0
    y_shift: float = 0.0
    scale: float = 0.0


@dataclass
class PollOption:
    """One answer option of a poll and how many users chose it."""

    text: str = ""
    voter_count: int = 0


@dataclass
class StickerSet:
    """A named set of stickers."""

    name: str = ""
    title: str = ""
    is_animated: bool = False
    contains_masks: bool = False
    stickers: list[Any] = field(default_factory=list)


@dataclass
class UserProfilePhotos:
    """A user's profile pictures, each in several sizes."""

    total_count: int = 0
    photos: list[list[PhotoSize]] = field(default_factory=list)


@dataclass
class Video:
    """A video file."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    duration: int = 0
    thumb: PhotoSize | None = None
    mime_type: str = ""
    file_size: int = 0