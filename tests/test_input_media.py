import pytest

from tgbot.input_media import InputMedia, InputMediaType


def test_defaults():
    media = InputMedia(InputMediaType.PHOTO)
    assert media.type is InputMediaType.PHOTO
    assert media.media == ""
    assert (media.width, media.height, media.duration) == (0, 0, 0)
    assert media.supports_streaming is False


def test_type_is_required():
    with pytest.raises(TypeError):
        InputMedia()


def test_all_media_kinds_exist():
    kinds = [InputMedia(member).type.name for member in InputMediaType]
    assert kinds == ["PHOTO", "VIDEO", "ANIMATION", "DOCUMENT", "AUDIO"]


def test_type_lookup_by_value_round_trip():
    for member in InputMediaType:
        assert InputMediaType(member.value) is member


def test_fields_are_kept():
    media = InputMedia(
        InputMediaType.VIDEO,
        media="attach://clip",
        caption="cap",
        parse_mode="HTML",
        width=640,
        height=480,
        duration=12,
        supports_streaming=True,
    )
    assert media.media == "attach://clip"
    assert media.parse_mode == "HTML"
    assert (media.width, media.height, media.duration) == (640, 480, 12)
    assert media.supports_streaming is True
    assert media == InputMedia(
        InputMediaType.VIDEO,
        media="attach://clip",
        caption="cap",
        parse_mode="HTML",
        width=640,
        height=480,
        duration=12,
        supports_streaming=True,
    )