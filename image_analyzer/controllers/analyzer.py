"""Анализатор изображения: оркестрация сервисов получения, уменьшения и подсчёта цветов.

SOLID:
- SRP: класс хранит состояние (оригинал, рабочая копия, кэш цветов) и делегирует расчёты сервисам.
- DIP: сервисы передаются в конструктор; по умолчанию используются стандартные реализации.
Clean Code:
- Поток данных только вниз: получение -> уменьшение -> цвета -> статистики.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set, Tuple

from image_analyzer.models.image_model import RGB, ImageData
from image_analyzer.services import color_service
from image_analyzer.services.image_service import ImageService
from image_analyzer.services.process_service import ProcessService

logger = logging.getLogger(__name__)


class ImageAnalyzer:
    """Цветовой анализ одного изображения.

    Ответственности:
    - Хранение оригинала (для размеров) и рабочей копии (для всех статистик).
    - Ленивый подсчёт множества цветов с кэшированием.
    - Доминирующий цвет, проверка на оттенки серого, подсказка порога.

    Кэш цветов заполняется один раз при первом обращении и больше не меняется.
    Методы, читающие цвета, мутируют этот кэш, поэтому экземпляр не потокобезопасен.
    """

    def __init__(self, image: ImageData, process_service: Optional[ProcessService] = None) -> None:
        self._process_service = process_service or ProcessService()
        self._image = image
        # уменьшение выполняется сразу, а не откладывается до первого запроса
        self._working_image = self._process_service.downsample(image)
        self._colors: Optional[Set[RGB]] = None

    # ---- Получение ----
    @classmethod
    def from_file(cls, path: str | Path, image_service: Optional[ImageService] = None,
                  process_service: Optional[ProcessService] = None) -> ImageAnalyzer:
        """Создаёт анализатор из файла.

        Raises:
            DecodeError: файл не найден или не является изображением.
        """
        image = (image_service or ImageService()).load_image(path)
        return cls(image, process_service=process_service)

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None, image_service: Optional[ImageService] = None,
                 process_service: Optional[ProcessService] = None) -> ImageAnalyzer:
        """Создаёт анализатор из JPEG по URL. Вызов блокирующий.

        Raises:
            FetchError: сетевая ошибка или таймаут.
            DecodeError: ответ не является JPEG.
        """
        service = image_service or ImageService(timeout=timeout)
        image = service.load_image_from_url(url)
        return cls(image, process_service=process_service)

    @classmethod
    def from_bytes(cls, data: bytes, format_hint: Optional[str] = None, source: Optional[str] = None,
                   image_service: Optional[ImageService] = None,
                   process_service: Optional[ProcessService] = None) -> ImageAnalyzer:
        image = (image_service or ImageService()).decode(data, format_hint=format_hint, source=source)
        return cls(image, process_service=process_service)

    # ---- Размеры ----
    @property
    def image(self) -> ImageData:
        return self._image

    @property
    def working_image(self) -> ImageData:
        return self._working_image

    def dimensions(self) -> Tuple[int, int]:
        """Размеры оригинала (не рабочей копии)."""
        return self._image.width, self._image.height

    def working_dimensions(self) -> Tuple[int, int]:
        return self._working_image.width, self._working_image.height

    # ---- Цвета ----
    def _color_set(self) -> Set[RGB]:
        if self._colors is None:
            self._colors = self._process_service.extract_colors(self._working_image)
            logger.debug(f"Cached {len(self._colors)} colors for {self._image.source or '<image>'}")
        return self._colors

    def colors(self) -> Set[RGB]:
        """Множество различных цветов рабочей копии.

        Первый вызов сканирует пиксели и заполняет кэш; последующие только копируют его.
        Возвращается копия: изменение результата не затрагивает кэш.
        """
        return set(self._color_set())

    # ---- Статистики ----
    def dominant_color(self) -> RGB:
        """Raises: EmptyInputError для изображения нулевой площади."""
        return color_service.dominant_color(self._color_set())

    def dominant_color_hex(self) -> str:
        return color_service.to_hex(self.dominant_color())

    def is_grayscale(self, threshold: int) -> bool:
        return color_service.is_grayscale(self._color_set(), threshold)

    def max_channel_difference(self) -> Optional[int]:
        """Подсказка порога: `is_grayscale(t)` истинно для любого t больше этого значения."""
        return color_service.max_channel_difference(self._color_set())

    def __repr__(self) -> str:
        w, h = self.dimensions()
        ww, wh = self.working_dimensions()
        return f"ImageAnalyzer(source={self._image.source!r}, size={w}x{h}, working={ww}x{wh})"
