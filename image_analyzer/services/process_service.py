from __future__ import annotations

import logging
import math
from typing import Optional, Set, Tuple

from PIL import Image

from image_analyzer import config
from image_analyzer.models.image_model import RGB, ImageData

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Округление к ближайшему целому, половины от нуля (2.5 -> 3)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


class ProcessService:
    def __init__(self, target_side: Optional[int] = None) -> None:
        self.target_side = target_side if target_side is not None else config.TARGET_SIDE

    # ---------- Уменьшение ----------
    def downsample_ratio(self, width: int, height: int) -> float:
        """
        Коэффициент масштабирования: короткая сторона -> target_side.
        Не больше 1.0: изображение никогда не увеличивается.
        """
        shorter = min(width, height)
        if shorter <= 0:
            return 1.0
        return min(self.target_side / shorter, 1.0)

    def downsampled_size(self, width: int, height: int) -> Tuple[int, int]:
        ratio = self.downsample_ratio(width, height)
        if ratio >= 1.0:
            return width, height
        return max(1, round_half_up(width * ratio)), max(1, round_half_up(height * ratio))

    def downsample(self, image: ImageData) -> ImageData:
        """
        Рабочая копия для подсчёта цветов.
        Треугольный (билинейный) фильтр: компромисс скорости и качества.
        Исходное изображение не изменяется.
        """
        if image.is_empty:
            return ImageData.from_pil(image.pil_image.copy(), source=image.source)
        new_size = self.downsampled_size(image.width, image.height)
        if new_size == (image.width, image.height):
            resized = image.pil_image.copy()
        else:
            resized = image.pil_image.resize(new_size, Image.Resampling.BILINEAR)
        logger.debug(
            f"Downsampled {image.width}x{image.height} -> {new_size[0]}x{new_size[1]} "
            f"(ratio {self.downsample_ratio(image.width, image.height):.4f})"
        )
        return ImageData.from_pil(resized, source=image.source)

    # ---------- Цвета ----------
    def extract_colors(self, image: ImageData) -> Set[RGB]:
        """
        Множество различных цветов (R, G, B), один проход по пикселям.
        Без квантования: цвета сравниваются точно.
        """
        colors: Set[RGB] = set(map(tuple, image.pixels().tolist()))
        logger.debug(f"Found {len(colors)} distinct colors in {image.width}x{image.height} image")
        return colors
