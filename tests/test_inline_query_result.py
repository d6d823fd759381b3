import pytest

from tgbot.inline_query_result import (
    InlineQueryResult,
    InlineQueryResultAudio,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedVideo,
    InlineQueryResultGame,
    InlineQueryResultGif,
    InlineQueryResultPhoto,
    InlineQueryResultVoice,
)
from tgbot.interaction_types import InlineKeyboardMarkup


@pytest.mark.parametrize(
    "cls, expected",
    [
        (InlineQueryResultAudio, "audio"),
        (InlineQueryResultCachedMpeg4Gif, "mpeg4_gif"),
        (InlineQueryResultCachedVideo, "video"),
        (InlineQueryResultGame, "game"),
        (InlineQueryResultGif, "gif"),
        (InlineQueryResultPhoto, "photo"),
        (InlineQueryResultVoice, "voice"),
    ],
)
def test_type_is_set_by_class(cls, expected):
    result = cls(id="r1")
    assert result.type == expected
    assert result.type == cls.TYPE
    assert result.id == "r1"
    assert isinstance(result, InlineQueryResult)


def test_base_type_is_empty():
    assert InlineQueryResult().type == ""


def test_type_cannot_be_passed():
    with pytest.raises(TypeError):
        InlineQueryResultGame(type="photo")


def test_numeric_defaults_are_zero():
    assert InlineQueryResultAudio().audio_duration == 0
    gif = InlineQueryResultGif()
    assert (gif.gif_width, gif.gif_height, gif.gif_duration) == (0, 0, 0)
    photo = InlineQueryResultPhoto()
    assert (photo.photo_width, photo.photo_height) == (0, 0)
    assert InlineQueryResultVoice().voice_duration == 0


def test_common_fields_and_markup():
    markup = InlineKeyboardMarkup(inline_keyboard=[["button"]])
    result = InlineQueryResultPhoto(
        id="p", title="t", caption="c", reply_markup=markup, photo_url="u", thumb_url="th"
    )
    assert result.reply_markup is markup
    assert result.title == "t"
    assert result.caption == "c"
    assert result.photo_url == "u"
    assert result.thumb_url == "th"
    assert result.input_message_content is None


def test_equality_includes_type():
    assert InlineQueryResultGame(id="a") == InlineQueryResultGame(id="a")
    assert InlineQueryResultGame(id="a") != InlineQueryResultGame(id="b")