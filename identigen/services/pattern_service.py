"""Цвет и симметричный узор из дайджеста.

Принципы:
- SRP: дайджест -> `Color` и `PatternGrid`; рисование не здесь.
- Целочисленная арифметика: те же байты дают те же пиксели на любой платформе.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from identigen.config import BRIGHTNESS, COLOR_BYTES, IdenticonConfigError
from identigen.models.identicon_model import Color, PatternGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BitCursor:
    """Позиция следующего бита узора: индекс байта и бита (младший бит первым)."""
    byte_index: int
    bit_index: int = 0

    @classmethod
    def start(cls) -> "BitCursor":
        return cls(byte_index=COLOR_BYTES, bit_index=0)

    def exhausted(self, digest: bytes) -> bool:
        return self.byte_index >= len(digest)

    def read(self, digest: bytes) -> int:
        return (digest[self.byte_index] >> self.bit_index) & 1

    def advance(self) -> "BitCursor":
        """Следующий бит; после 7-го бита — нулевой бит следующего байта."""
        if self.bit_index + 1 >= 8:
            return BitCursor(self.byte_index + 1, 0)
        return BitCursor(self.byte_index, self.bit_index + 1)


def half_width(grid_size: int) -> int:
    """Число независимых столбцов: левая половина плюс центральный при нечётном G."""
    return (grid_size + 1) // 2


class PatternService:
    def derive_color(
        self,
        digest: bytes,
        min_brightness: int = BRIGHTNESS.min,
        max_brightness: int = BRIGHTNESS.max,
    ) -> Color:
        """Цвет из первых трёх байтов, сжатый в полосу [min, max].

        channel = min + v * (max - min) // 255

        Raises:
            IdenticonConfigError: если полоса пуста или выходит за 0..255,
                либо в дайджесте меньше трёх байтов.
        """
        if not 0 <= min_brightness <= max_brightness <= 255:
            raise IdenticonConfigError(
                f"Некорректная полоса яркости: [{min_brightness}, {max_brightness}]"
            )
        if len(digest) < COLOR_BYTES:
            raise IdenticonConfigError(
                f"Для цвета нужно {COLOR_BYTES} байта дайджеста, получено {len(digest)}"
            )
        span = max_brightness - min_brightness
        r, g, b = (min_brightness + v * span // 255 for v in digest[:COLOR_BYTES])
        color = Color(r=r, g=g, b=b)
        logger.debug("Color %s from bytes %s", color.hex, digest[:COLOR_BYTES].hex())
        return color

    def derive_grid(self, digest: bytes, grid_size: int) -> PatternGrid:
        """Строит сетку G×G, зеркальную относительно вертикальной оси.

        Биты берутся построчно, в каждой строке только для левой половины,
        и сразу копируются в столбец G-1-col. Когда дайджест закончился,
        оставшиеся ячейки остаются пустыми (байты не переиспользуются).

        Raises:
            IdenticonConfigError: если grid_size < 1.
        """
        if grid_size < 1:
            raise IdenticonConfigError(f"Размер сетки должен быть положительным: {grid_size}")

        cells = np.zeros((grid_size, grid_size), dtype=bool)
        cursor = BitCursor.start()

        for row in range(grid_size):
            for col in range(half_width(grid_size)):
                if cursor.exhausted(digest):
                    break
                filled = cursor.read(digest) == 1
                cells[row, col] = filled
                # center column of an odd grid mirrors onto itself
                cells[row, grid_size - 1 - col] = filled
                cursor = cursor.advance()

        if cursor.exhausted(digest):
            logger.debug(
                "Digest exhausted for grid %d; rows past %d stay empty",
                grid_size,
                self.usable_rows(len(digest), grid_size),
            )
        return PatternGrid(cells=cells)

    def usable_rows(self, digest_length: int, grid_size: int) -> int:
        """Сколько строк заполняется полностью до исчерпания дайджеста."""
        bits = max(0, digest_length - COLOR_BYTES) * 8
        return bits // half_width(grid_size)
