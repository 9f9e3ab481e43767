"""Модель цвета: три 8-битных канала.

Принципы:
- SRP: только значение цвета, без логики изображения.
- Неизменяемость (`frozen=True`): цвет сравнивается по значениям компонент.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Integral
from typing import ClassVar, Iterator, Tuple

CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """RGB-цвет.

    Fields:
        red: Интенсивность красного, 0..255.
        green: Интенсивность зелёного, 0..255.
        blue: Интенсивность синего, 0..255.

    Принимает любые целые (в том числе `numpy.uint8`) и хранит их как `int`.
    """
    red: int
    green: int
    blue: int

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            # bool is Integral too, but True is not a channel value
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"Канал {field.name} должен быть целым числом, получено {value!r}")
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"Канал {field.name}={value} вне диапазона [0, {CHANNEL_MAX}]")
            object.__setattr__(self, field.name, int(value))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)
