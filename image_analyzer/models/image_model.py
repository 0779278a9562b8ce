"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PIL import Image

RGB = Tuple[int, int, int]


def to_rgb(pil_image: Image.Image) -> Image.Image:
    """Приводит изображение к 8-битному RGB.

    16-битные режимы ("I;16*", "I") масштабируются до 8 бит сдвигом, а не обрезаются.
    """
    mode = pil_image.mode
    if (mode == "I" or mode.startswith("I;16")) and pil_image.width and pil_image.height:
        arr = np.asarray(pil_image).astype(np.int64)
        arr = (np.clip(arr, 0, 65535) >> 8).astype(np.uint8)
        pil_image = Image.fromarray(arr)
    if pil_image.mode != "RGB":
        pil_image = pil_image.convert("RGB")
    return pil_image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая сетка пикселей RGB и её метаданные.

    Fields:
        source: Путь к файлу или URL, откуда получено изображение.
        pil_image: Изображение PIL в режиме "RGB".
        width: Ширина, px.
        height: Высота, px.
        size_bytes: Размер исходных данных, если известен.
    """
    source: Optional[str]
    pil_image: Image.Image
    width: int
    height: int
    size_bytes: Optional[int] = None

    @classmethod
    def from_pil(cls, pil_image: Image.Image, source: Optional[str] = None,
                 size_bytes: Optional[int] = None) -> ImageData:
        """Упаковывает изображение PIL, приводя его к 3-канальному RGB."""
        pil_image = to_rgb(pil_image)
        width, height = pil_image.size
        return cls(source=source, pil_image=pil_image, width=width, height=height, size_bytes=size_bytes)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def pixels(self) -> np.ndarray:
        """Возвращает пиксели массивом uint8 формы (N, 3)."""
        if self.is_empty:
            return np.empty((0, 3), dtype=np.uint8)
        return np.asarray(self.pil_image, dtype=np.uint8).reshape(-1, 3)
