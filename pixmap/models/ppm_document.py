"""Промежуточное представление файла ASCII-PPM.

Живёт только в пределах одного вызова `decode`/`encode`: поля заголовка
и сырые значения каналов в порядке следования в файле.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MAGIC = "P3"


@dataclass(frozen=True)
class PpmDocument:
    """Разобранный (или подготовленный к записи) документ P3.

    Fields:
        magic: Магическая строка, всегда "P3".
        width: Ширина, px.
        height: Высота, px.
        max_value: Максимальное значение канала в файле.
        samples: Значения каналов R, G, B, R, G, B, ... построчно.
    """
    magic: str
    width: int
    height: int
    max_value: int
    samples: Tuple[int, ...]

    @property
    def sample_count(self) -> int:
        return self.width * self.height * 3
