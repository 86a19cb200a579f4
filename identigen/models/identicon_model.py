"""Модели данных identicon.

Принципы:
- SRP: только структура данных, без логики генерации.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class Color:
    """Цвет заполненных ячеек, каждый канал в полосе яркости."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True, eq=False)
class PatternGrid:
    """Квадратная булева матрица узора (строка, столбец).

    Fields:
        cells: `np.ndarray` формы (G, G), dtype bool; True — ячейка закрашена.
    """
    cells: np.ndarray

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    def is_filled(self, row: int, col: int) -> bool:
        return bool(self.cells[row, col])

    def filled_count(self) -> int:
        return int(self.cells.sum())

    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        """Строки в виде кортежей — удобно для сравнения и вывода."""
        return tuple(tuple(bool(v) for v in row) for row in self.cells)


@dataclass(frozen=True)
class IdenticonParams:
    """Параметры растра.

    Fields:
        image_size: Сторона изображения S, px.
        grid_size: Сторона сетки G, ячеек.
        padding_percent: Отступ P, % от S с каждой стороны.
    """
    image_size: int
    grid_size: int
    padding_percent: int


@dataclass(frozen=True, eq=False)
class Identicon:
    """Результат генерации: исходные данные и готовое изображение."""
    seed: str
    digest: bytes
    color: Color
    grid: PatternGrid
    params: IdenticonParams
    image: Image.Image

    @property
    def digest_hex(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class SavedImage:
    """Метаданные сохранённого PNG.

    Fields:
        path: Путь к файлу.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
