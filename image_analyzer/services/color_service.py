"""Статистики по набору различных цветов.

Все функции работают с множеством цветов, а не с пикселями: цвет, встреченный
один раз, и цвет, встреченный тысячи раз, учитываются одинаково.
"""
from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from image_analyzer.errors import EmptyInputError
from image_analyzer.models.image_model import RGB
from image_analyzer.services.process_service import round_half_up


def _as_array(colors: Iterable[RGB]) -> np.ndarray:
    arr = np.array(list(colors), dtype=np.int16)
    return arr.reshape(-1, 3)


def channel_differences(colors: Iterable[RGB]) -> np.ndarray:
    """
    Попарные модули разностей каналов для каждого цвета.
    Столбцы: |r-g|, |g-b|, |r-b|. Форма (N, 3).
    """
    arr = _as_array(colors)
    r, g, b = arr[:, 0], arr[:, 1], arr[:, 2]
    return np.column_stack([np.abs(r - g), np.abs(g - b), np.abs(r - b)])


def dominant_color(colors: Iterable[RGB]) -> RGB:
    """Среднее по каждому каналу среди различных цветов, с округлением.

    Raises:
        EmptyInputError: если цветов нет (деление на ноль).
    """
    arr = _as_array(colors)
    if arr.shape[0] == 0:
        raise EmptyInputError("Невозможно вычислить доминирующий цвет: набор цветов пуст")
    sums = arr.astype(np.uint64).sum(axis=0)
    count = arr.shape[0]
    r, g, b = (round_half_up(float(s) / count) for s in sums)
    return r, g, b


def is_grayscale(colors: Iterable[RGB], threshold: int) -> bool:
    """Все ли цвета нейтральны: каждая попарная разность строго меньше порога.

    Пустой набор считается оттенками серого (конъюнкция по пустому множеству).
    """
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold должен быть в диапазоне 0..255, получено {threshold}")
    diffs = channel_differences(colors)
    return bool(np.all(diffs < threshold))


def max_channel_difference(colors: Iterable[RGB]) -> Optional[int]:
    """Наибольшая попарная разность каналов по всему набору; None для пустого набора."""
    diffs = channel_differences(colors)
    if diffs.size == 0:
        return None
    return int(diffs.max())


def to_hex(color: RGB) -> str:
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"
