"""Получение изображений: чтение с диска, загрузка по URL, декодирование.

Принципы:
- SRP: класс отвечает только за получение байтов и их декодирование в RGB.
- OCP: новые источники (стрим, URL) добавляются отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

import requests
from PIL import Image, UnidentifiedImageError

from image_analyzer import config
from image_analyzer.errors import DecodeError, FetchError
from image_analyzer.models.image_model import ImageData, to_rgb

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None) -> None:
        self.timeout = timeout if timeout is not None else config.FETCH_TIMEOUT
        self.user_agent = user_agent or config.USER_AGENT

    def decode(self, data: bytes, format_hint: Optional[str] = None, source: Optional[str] = None) -> ImageData:
        """Декодирует байты в сетку пикселей RGB.

        Args:
            data: Закодированное изображение.
            format_hint: Формат PIL, например "JPEG". Если задан, другие форматы не принимаются.
            source: Откуда получены байты (для метаданных и сообщений).

        Returns:
            `ImageData` в режиме RGB с полным разрешением.

        Raises:
            DecodeError: если байты не являются изображением (ожидаемого формата).
        """
        formats = [format_hint.upper()] if format_hint else None
        try:
            with Image.open(io.BytesIO(data), formats=formats) as pil_image:
                # convert() читает пиксели полностью, поэтому ошибки в данных всплывают здесь
                rgb = to_rgb(pil_image)
        except UnidentifiedImageError as exc:
            expected = f"{format_hint} " if format_hint else ""
            raise DecodeError(f"Данные не являются {expected}изображением: {source or '<bytes>'}") from exc
        except (Image.DecompressionBombError, OSError, EOFError, ValueError, SyntaxError) as exc:
            raise DecodeError(f"Не удалось декодировать изображение {source or '<bytes>'}: {exc}") from exc

        return ImageData.from_pil(rgb, source=source, size_bytes=len(data))

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска.

        Raises:
            DecodeError: если путь не указывает на файл или файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.is_file():
            raise DecodeError(f"Файл не найден: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise DecodeError(f"Не удалось прочитать файл {path}: {exc}") from exc

        image = self.decode(data, source=str(path))
        logger.info(f"Loaded {path} ({image.width}x{image.height})")
        return image

    def fetch_bytes(self, url: str) -> bytes:
        """Скачивает тело ответа по URL.

        Raises:
            FetchError: DNS/соединение/таймаут, статус не 2xx или ответ без изображения.
        """
        try:
            response = requests.get(url, timeout=self.timeout, headers={"User-Agent": self.user_agent})
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning(f"Failed to fetch {url}: {exc}")
            raise FetchError(f"Не удалось загрузить {url}: {exc}") from exc

        content_type = response.headers.get("Content-Type", "")
        # сервер может не прислать заголовок; тогда решает декодер
        if content_type and not content_type.lower().startswith(("image/", "application/octet-stream")):
            logger.warning(f"Unexpected content type from {url}: {content_type}")
            raise FetchError(f"Ответ {url} не является изображением: {content_type}")
        return response.content

    def load_image_from_url(self, url: str) -> ImageData:
        """Загружает JPEG по URL и декодирует его.

        Raises:
            FetchError: при сетевой ошибке.
            DecodeError: если тело ответа не JPEG.
        """
        data = self.fetch_bytes(url)
        image = self.decode(data, format_hint="JPEG", source=url)
        logger.info(f"Fetched {url} ({image.width}x{image.height}, {len(data)} bytes)")
        return image
