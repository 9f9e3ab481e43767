"""Кодек ASCII-PPM (P3): байты <-> `PixelGrid`.

Принципы:
- SRP: только грамматика формата; файлы открывает вызывающий код.
- Разбор — один проход по токенам вперёд, без возвратов; любая ошибка
  грамматики завершает `decode` исключением из `pixmap.models.errors`.

Масштабирование при max value != 255: округление половины вверх,
`(value * 510 + max_value) // (2 * max_value)` в целых числах, с ограничением
сверху 255. Например, 50 при max value 100 даёт 128.
"""
from __future__ import annotations

import re
from itertools import islice
from typing import BinaryIO, Iterator, List, Optional, Type, Union

import numpy as np

from pixmap.config import DEFAULT_ENCODER_SETTINGS, EncoderSettings
from pixmap.models.color import CHANNEL_MAX
from pixmap.models.errors import (
    BadMagic,
    ChannelOutOfRange,
    InvalidDimensions,
    InvalidMaxValue,
    PixmapError,
    TruncatedData,
)
from pixmap.models.pixel_grid import PixelGrid
from pixmap.models.ppm_document import MAGIC, PpmDocument

BytesLike = Union[bytes, bytearray, memoryview]

_COMMENT = re.compile(rb"#[^\r\n]*")
_TOKEN = re.compile(rb"[^ \t\r\n]+")
_DECIMAL = re.compile(rb"[0-9]+")
# header fields wider than this are rejected before int() conversion
_HEADER_DIGITS = 18


class PpmCodec:
    def decode(self, data: BytesLike) -> PixelGrid:
        """Разбирает байты ASCII-PPM и возвращает сетку пикселей.

        Args:
            data: Полное содержимое файла.

        Returns:
            `PixelGrid` с размерами из заголовка; цвета приведены к шкале 0..255.

        Raises:
            TypeError: если передано не bytes, bytearray или memoryview.
            BadMagic: первый токен не "P3".
            InvalidDimensions: ширина/высота отсутствует, не число или < 1.
            InvalidMaxValue: max value отсутствует, не число или < 1.
            TruncatedData: значений каналов меньше width*height*3.
            ChannelOutOfRange: значение канала не число или вне [0, max value].
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"decode() ожидает bytes, получено {type(data).__name__}")
        document = self._parse(self._tokenize(bytes(data)))
        return self._to_grid(document)

    def decode_stream(self, source: BinaryIO) -> PixelGrid:
        """Читает бинарный поток до конца и декодирует его."""
        return self.decode(source.read())

    def encode(self, grid: PixelGrid, settings: Optional[EncoderSettings] = None) -> bytes:
        """Сериализует сетку в ASCII-PPM с max value 255.

        Раскладка пробелов и переносов задаётся `settings` и на грамматику не влияет.
        """
        settings = settings or DEFAULT_ENCODER_SETTINGS
        return self._render(self._from_grid(grid), settings).encode("ascii")

    def encode_to(self, grid: PixelGrid, sink: BinaryIO, settings: Optional[EncoderSettings] = None) -> int:
        """Пишет закодированную сетку в бинарный поток, возвращает число байт."""
        payload = self.encode(grid, settings)
        sink.write(payload)
        return len(payload)

    # ---------- Разбор ----------
    def _tokenize(self, data: bytes) -> Iterator[bytes]:
        """Ленивый поток токенов: комментарии вырезаются до разбиения по пробелам."""
        stripped = _COMMENT.sub(b"", data)
        return (match.group() for match in _TOKEN.finditer(stripped))

    def _parse(self, tokens: Iterator[bytes]) -> PpmDocument:
        magic = next(tokens, None)
        if magic != MAGIC.encode("ascii"):
            shown = "<пусто>" if magic is None else _show(magic)
            raise BadMagic(f"Ожидалась магическая строка {MAGIC}, получено {shown}")

        width = self._read_positive(tokens, "ширина", InvalidDimensions)
        height = self._read_positive(tokens, "высота", InvalidDimensions)
        max_value = self._read_positive(tokens, "max value", InvalidMaxValue)

        expected = width * height * 3
        payload = list(islice(tokens, expected))
        if len(payload) < expected:
            raise TruncatedData(expected, len(payload))

        samples: List[int] = []
        for position, token in enumerate(payload):
            value = _parse_decimal(token, len(str(max_value)))
            if value is None or value > max_value:
                raise ChannelOutOfRange(position, _show(token), max_value)
            samples.append(value)

        return PpmDocument(MAGIC, width, height, max_value, tuple(samples))

    def _read_positive(self, tokens: Iterator[bytes], field: str, error: Type[PixmapError]) -> int:
        token = next(tokens, None)
        if token is None:
            raise error(f"В заголовке отсутствует поле: {field}")
        value = _parse_decimal(token, _HEADER_DIGITS)
        if value is None or value < 1:
            raise error(f"Поле {field} должно быть положительным целым, получено {_show(token)[:32]}")
        return value

    def _to_grid(self, document: PpmDocument) -> PixelGrid:
        samples = document.samples
        if document.max_value != CHANNEL_MAX:
            samples = tuple(_scale(value, document.max_value) for value in samples)
        array = np.array(samples, dtype=np.uint8).reshape(document.height, document.width, 3)
        return PixelGrid.from_array(array)

    # ---------- Запись ----------
    def _from_grid(self, grid: PixelGrid) -> PpmDocument:
        samples = tuple(grid.to_array().reshape(-1).tolist())
        return PpmDocument(MAGIC, grid.width, grid.height, CHANNEL_MAX, samples)

    def _render(self, document: PpmDocument, settings: EncoderSettings) -> str:
        lines = [document.magic]
        if settings.comment is not None:
            lines.extend(f"# {text}".rstrip() for text in settings.comment.splitlines() or [""])
        lines.append(f"{document.width} {document.height}")
        lines.append(str(document.max_value))

        row_len = document.width * 3
        chunk = (settings.pixels_per_line or document.width) * 3
        for row_start in range(0, document.sample_count, row_len):
            row_end = row_start + row_len
            for start in range(row_start, row_end, chunk):
                lines.append(" ".join(map(str, document.samples[start:min(start + chunk, row_end)])))
        return "\n".join(lines) + "\n"


def _scale(value: int, max_value: int) -> int:
    return min(CHANNEL_MAX, (value * 2 * CHANNEL_MAX + max_value) // (2 * max_value))


def _parse_decimal(token: bytes, max_digits: int) -> Optional[int]:
    """Целое из ASCII-цифр или None, если это не число или в нём больше `max_digits` значащих цифр."""
    if not _DECIMAL.fullmatch(token):
        return None
    digits = token.lstrip(b"0") or b"0"
    if len(digits) > max_digits:
        return None
    return int(digits)


def _show(token: bytes) -> str:
    return token.decode("ascii", errors="replace")
