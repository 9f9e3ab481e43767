"""Загрузка и сохранение PPM на диске, обмен с Pillow.

Принципы:
- SRP: сервис отвечает только за источники/приёмники байт; грамматика — в `PpmCodec`.
- Файл — лишь один из источников байт: всё, что умеет `read()`, идёт напрямую в `PpmCodec.decode_stream`.
- Ошибки кодека пробрасываются без изменений.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from pixmap.config import EncoderSettings
from pixmap.models.pixel_grid import PixelGrid
from pixmap.services.ppm_codec import PpmCodec

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, codec: Optional[PpmCodec] = None) -> None:
        self._codec = codec or PpmCodec()

    def load_ppm(self, file_path: str | Path) -> PixelGrid:
        """Открывает PPM-файл на чтение и передаёт поток кодеку.

        Raises:
            FileNotFoundError: по пути нет обычного файла (в том числе если это каталог).
            PixmapError: содержимое не разбирается как P3.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Нет PPM-файла по пути {path}")

        with path.open("rb") as source:
            grid = self._codec.decode_stream(source)
        logger.debug("Loaded %s: %dx%d", path, grid.width, grid.height)
        return grid

    def save_ppm(self, grid: PixelGrid, file_path: str | Path, settings: Optional[EncoderSettings] = None) -> Path:
        """Записывает сетку в файл ASCII-PPM и возвращает абсолютный путь."""
        path = Path(file_path)
        with path.open("wb") as sink:
            written = self._codec.encode_to(grid, sink, settings)
        logger.debug("Saved %s: %dx%d, %d bytes", path, grid.width, grid.height, written)
        return path.resolve()

    # ---- Pillow interop ----
    def to_pil(self, grid: PixelGrid) -> Image.Image:
        """Изображение PIL в режиме RGB, например для `Image.show()`."""
        return Image.fromarray(grid.to_array())

    def from_pil(self, image: Image.Image) -> PixelGrid:
        """Сетка из изображения PIL любого режима (приводится к RGB, альфа отбрасывается)."""
        rgb = image if image.mode == "RGB" else image.convert("RGB")
        return PixelGrid.from_array(np.asarray(rgb, dtype=np.uint8))
