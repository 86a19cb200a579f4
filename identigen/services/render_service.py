"""Растеризация узора в квадратное RGB-изображение.

Принципы:
- SRP: цвет + сетка + размеры -> пиксели; файл и формат здесь не известны.
- Вся геометрия целочисленная, остаток от деления делится поровну по краям.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image

from identigen.config import BACKGROUND, IdenticonConfigError
from identigen.models.identicon_model import Color, PatternGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Layout:
    """Геометрия растра.

    Fields:
        margin: Отступ от края по P, px.
        drawable: Сторона рабочей области, px.
        cell_size: Сторона ячейки, px.
        offset: Смещение сетки от края (margin + половина остатка), px.
        extent: Сторона закрашиваемой области cell_size * G, px.
    """
    margin: int
    drawable: int
    cell_size: int
    offset: int
    extent: int


class RenderService:
    def compute_layout(self, image_size: int, grid_size: int, padding_percent: int) -> Layout:
        """Считает отступы и размер ячейки.

        Raises:
            IdenticonConfigError: если рабочая область или ячейка получаются
                нулевыми/отрицательными, либо параметры вне допустимых значений.
        """
        if image_size < 1:
            raise IdenticonConfigError(f"Размер изображения должен быть положительным: {image_size}")
        if grid_size < 1:
            raise IdenticonConfigError(f"Размер сетки должен быть положительным: {grid_size}")
        if not 0 <= padding_percent <= 100:
            raise IdenticonConfigError(f"Отступ должен быть в диапазоне 0..100%: {padding_percent}")

        margin = image_size * padding_percent // 100
        drawable = image_size - 2 * margin
        if drawable <= 0:
            raise IdenticonConfigError(
                f"Отступ {padding_percent}% не оставляет места для рисования при размере {image_size}px"
            )
        cell_size = drawable // grid_size
        if cell_size <= 0:
            raise IdenticonConfigError(
                f"Рабочая область {drawable}px меньше сетки {grid_size}×{grid_size}"
            )
        extent = cell_size * grid_size
        offset = margin + (drawable - extent) // 2
        return Layout(margin=margin, drawable=drawable, cell_size=cell_size, offset=offset, extent=extent)

    def render_array(
        self, color: Color, grid: PatternGrid, image_size: int, padding_percent: int
    ) -> np.ndarray:
        """Возвращает массив uint8 формы (S, S, 3): фон белый, ячейки — цвет."""
        layout = self.compute_layout(image_size, grid.size, padding_percent)
        canvas = np.empty((image_size, image_size, 3), dtype=np.uint8)
        canvas[:, :] = BACKGROUND

        cell = layout.cell_size
        fill = np.array(color.as_tuple(), dtype=np.uint8)
        # sparse: only filled cells are painted
        for row, col in np.argwhere(grid.cells):
            y0 = layout.offset + int(row) * cell
            x0 = layout.offset + int(col) * cell
            canvas[y0:y0 + cell, x0:x0 + cell] = fill

        logger.debug(
            "Rendered %dpx identicon: grid=%d cell=%d offset=%d filled=%d",
            image_size, grid.size, cell, layout.offset, grid.filled_count(),
        )
        return canvas

    def rasterize(
        self, color: Color, grid: PatternGrid, image_size: int, padding_percent: int
    ) -> Image.Image:
        """То же, что `render_array`, но в виде изображения PIL (режим RGB)."""
        canvas = self.render_array(color, grid, image_size, padding_percent)
        return Image.fromarray(canvas)
