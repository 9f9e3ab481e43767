import pytest

from pixmap.config import DEFAULT_ENCODER_SETTINGS, EncoderSettings


def test_defaults():
    assert DEFAULT_ENCODER_SETTINGS.pixels_per_line is None
    assert DEFAULT_ENCODER_SETTINGS.comment is None


@pytest.mark.parametrize("value", [0, -2, 1.5, True])
def test_invalid_pixels_per_line(value):
    with pytest.raises(ValueError):
        EncoderSettings(pixels_per_line=value)


def test_non_ascii_comment():
    with pytest.raises(ValueError):
        EncoderSettings(comment="цвет")


def test_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_ENCODER_SETTINGS.comment = "x"  # type: ignore[misc]


@pytest.mark.parametrize("value", [123, b"bytes", ["list"]])
def test_comment_must_be_str(value):
    with pytest.raises(ValueError):
        EncoderSettings(comment=value)
