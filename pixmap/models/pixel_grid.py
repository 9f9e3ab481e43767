"""Пиксельная сетка фиксированного размера.

Принципы:
- SRP: только хранение пикселей и безопасный доступ к ним, без форматов файлов.
- Инвариант: буфер `numpy.uint8` формы (height, width, 3), строки сверху вниз,
  пиксели в строке слева направо; размеры не меняются после создания.
"""
from __future__ import annotations

from numbers import Integral
from typing import Iterator, Tuple, Union

import numpy as np

from pixmap.models.color import CHANNEL_MAX, Color
from pixmap.models.errors import InvalidDimensions, OutOfBounds

ColorLike = Union[Color, Tuple[int, int, int]]


def _is_index(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class PixelGrid:
    """Прямоугольный массив цветов `width` x `height`.

    Args:
        width: Ширина, px (>= 1).
        height: Высота, px (>= 1).
        fill: Начальный цвет всех пикселей, по умолчанию чёрный.

    Raises:
        InvalidDimensions: если ширина или высота не целое число >= 1.
    """

    def __init__(self, width: int, height: int, fill: ColorLike = Color.BLACK) -> None:
        if not (_is_index(width) and _is_index(height)) or width < 1 or height < 1:
            raise InvalidDimensions(f"Недопустимые размеры изображения: {width!r}x{height!r}")
        self._width = int(width)
        self._height = int(height)
        self._data = np.empty((self._height, self._width, 3), dtype=np.uint8)
        self.fill(fill)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelGrid":
        """Создаёт сетку из массива формы (height, width, 3) со значениями 0..255.

        Массив копируется: дальнейшие изменения исходника сетку не затрагивают.
        """
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != 3 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise InvalidDimensions(f"Ожидался массив формы (height, width, 3), получено {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Ожидался целочисленный массив, получено {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > CHANNEL_MAX):
            raise ValueError(f"Значения каналов вне диапазона [0, {CHANNEL_MAX}]")

        grid = cls.__new__(cls)
        grid._height, grid._width = int(arr.shape[0]), int(arr.shape[1])
        grid._data = np.array(arr, dtype=np.uint8)
        return grid

    # ---- Dimensions ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    # ---- Pixel access ----
    def _check_bounds(self, x: object, y: object) -> None:
        # negative indices must not wrap around as numpy would do
        if not (_is_index(x) and _is_index(y)) or not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBounds(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> Color:
        """Возвращает цвет пикселя в столбце `x` строки `y`."""
        self._check_bounds(x, y)
        r, g, b = self._data[y, x]
        return Color(r, g, b)

    def set(self, x: int, y: int, color: ColorLike) -> None:
        """Заменяет цвет пикселя в столбце `x` строки `y`."""
        self._check_bounds(x, y)
        self._data[y, x] = _as_color(color).as_tuple()

    def fill(self, color: ColorLike) -> None:
        self._data[:, :] = _as_color(color).as_tuple()

    def pixels(self) -> Iterator[Color]:
        """Цвета всех пикселей построчно (row-major)."""
        for r, g, b in self._data.reshape(-1, 3):
            yield Color(r, g, b)

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"PixelGrid(width={self._width}, height={self._height})"


def _as_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    return Color(*color)
