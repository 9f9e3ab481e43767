import numpy as np
import pytest

from pixmap.models.color import Color


def test_constants():
    assert Color.BLACK == Color(0, 0, 0)
    assert Color.WHITE.as_tuple() == (255, 255, 255)


def test_value_semantics():
    assert Color(1, 2, 3) == Color(1, 2, 3)
    assert hash(Color(1, 2, 3)) == hash(Color(1, 2, 3))
    assert list(Color(1, 2, 3)) == [1, 2, 3]


def test_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        color.red = 5  # type: ignore[misc]


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0), ("1", 0, 0)])
def test_rejects_invalid_channels(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_numpy_integers_are_stored_as_int():
    color = Color(np.uint8(10), np.int64(20), 30)
    assert type(color.red) is int
    assert type(color.green) is int
    assert color == Color(10, 20, 30)
