"""Настройки раскладки текста при записи PPM.

Грамматика P3 не фиксирует пробелы и переносы строк, поэтому раскладка
задаётся вызывающим кодом и не влияет на совместимость файла.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EncoderSettings:
    """Неизменяемые настройки кодировщика.

    Fields:
        pixels_per_line: Сколько пикселей писать в одну строку текста.
            `None` — одна строка файла на строку изображения.
        comment: Текст комментария после магической строки; каждая его
            строка записывается как `# ...`. Только ASCII.
    """
    pixels_per_line: Optional[int] = None
    comment: Optional[str] = None

    def __post_init__(self) -> None:
        if self.pixels_per_line is not None:
            if isinstance(self.pixels_per_line, bool) or not isinstance(self.pixels_per_line, int):
                raise ValueError(f"pixels_per_line должен быть целым, получено {self.pixels_per_line!r}")
            if self.pixels_per_line < 1:
                raise ValueError(f"pixels_per_line должен быть >= 1, получено {self.pixels_per_line}")
        if self.comment is not None and not isinstance(self.comment, str):
            raise ValueError(f"comment должен быть строкой, получено {self.comment!r}")
        if self.comment is not None and not self.comment.isascii():
            raise ValueError("Комментарий PPM должен содержать только ASCII-символы")


DEFAULT_ENCODER_SETTINGS = EncoderSettings()
