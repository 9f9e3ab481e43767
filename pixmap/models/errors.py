"""Ошибки ядра: пиксельная сетка и кодек ASCII-PPM.

Принципы:
- Закрытая таксономия: один класс на каждый вид ошибки, плюс `ErrorKind`
  для ветвления без `isinstance`.
- Совместимость: классы наследуют `ValueError`/`IndexError`, поэтому
  обычные `except ValueError` продолжают работать.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_DIMENSIONS = "InvalidDimensions"
    OUT_OF_BOUNDS = "OutOfBounds"
    BAD_MAGIC = "BadMagic"
    INVALID_MAX_VALUE = "InvalidMaxValue"
    TRUNCATED_DATA = "TruncatedData"
    CHANNEL_OUT_OF_RANGE = "ChannelOutOfRange"


class PixmapError(Exception):
    """Базовая ошибка пакета. Конкретный вид хранится в `kind`."""
    kind: ErrorKind


class InvalidDimensions(PixmapError, ValueError):
    kind = ErrorKind.INVALID_DIMENSIONS


class OutOfBounds(PixmapError, IndexError):
    kind = ErrorKind.OUT_OF_BOUNDS

    def __init__(self, x: object, y: object, width: int, height: int) -> None:
        super().__init__(f"Координаты x={x} y={y} вне изображения {width}x{height}")
        self.x = x
        self.y = y


class BadMagic(PixmapError, ValueError):
    kind = ErrorKind.BAD_MAGIC


class InvalidMaxValue(PixmapError, ValueError):
    kind = ErrorKind.INVALID_MAX_VALUE


class TruncatedData(PixmapError, ValueError):
    kind = ErrorKind.TRUNCATED_DATA

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Недостаточно значений каналов: {actual} < {expected}")
        self.expected = expected
        self.actual = actual


class ChannelOutOfRange(PixmapError, ValueError):
    kind = ErrorKind.CHANNEL_OUT_OF_RANGE

    def __init__(self, position: int, token: str, max_value: int) -> None:
        super().__init__(
            f"Значение канала №{position} ({token!r}) не является целым в диапазоне [0, {max_value}]"
        )
        self.position = position
        self.token = token
