"""Results that a bot can return in answer to an inline query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from tgbot.interaction_types import InlineKeyboardMarkup


@dataclass
class InlineQueryResult:
    """Base of all inline query results.

    ``type`` is fixed by the concrete class and cannot be passed in.
    """

    TYPE: ClassVar[str] = ""

    type: str = field(init=False, default="")
    id: str = ""
    title: str = ""
    caption: str = ""
    reply_markup: InlineKeyboardMarkup | None = None
    input_message_content: Any = None

    def __post_init__(self) -> None:
        self.type = self.TYPE


@dataclass
class InlineQueryResultAudio(InlineQueryResult):
    """A link to an mp3 audio file."""

    TYPE: ClassVar[str] = "audio"

    audio_url: str = ""
    performer: str = ""
    audio_duration: int = 0


@dataclass
class InlineQueryResultCachedMpeg4Gif(InlineQueryResult):
    """A video animation without sound stored on the server."""

    TYPE: ClassVar[str] = "mpeg4_gif"

    mpeg4_file_id: str = ""


@dataclass
class InlineQueryResultCachedVideo(InlineQueryResult):
    """A video file stored on the server."""

    TYPE: ClassVar[str] = "video"

    video_file_id: str = ""
    description: str = ""


@dataclass
class InlineQueryResultGame(InlineQueryResult):
    """A game."""

    TYPE: ClassVar[str] = "game"

    game_short_name: str = ""


@dataclass
class InlineQueryResultGif(InlineQueryResult):
    """A link to an animated GIF file."""

    TYPE: ClassVar[str] = "gif"

    gif_url: str = ""
    gif_width: int = 0
    gif_height: int = 0
    gif_duration: int = 0
    thumb_url: str = ""


@dataclass
class InlineQueryResultPhoto(InlineQueryResult):
    """A link to a photo."""

    TYPE: ClassVar[str] = "photo"

    photo_url: str = ""
    thumb_url: str = ""
    photo_width: int = 0
    photo_height: int = 0
    description: str = ""


@dataclass
class InlineQueryResultVoice(InlineQueryResult):
    """A link to a voice recording."""

    TYPE: ClassVar[str] = "voice"

    voice_url: str = ""
    voice_duration: int = 0