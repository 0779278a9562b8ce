"""Ошибки анализа изображений.

Получение изображения либо завершается успешно, либо бросает исключение:
частично созданный анализатор наружу не попадает.
"""


class ImageAnalyzerError(Exception):
    """Базовое исключение пакета."""


class DecodeError(ImageAnalyzerError, ValueError):
    """Байты не распознаны как изображение (или как изображение ожидаемого формата)."""


class FetchError(ImageAnalyzerError, ConnectionError):
    """Сетевая ошибка: DNS, соединение, таймаут, статус не 2xx, не-изображение в ответе."""


class EmptyInputError(ImageAnalyzerError, ValueError):
    """Статистика требует непустого набора цветов."""
