"""Константы и границы параметров генерации identicon.

Принципы:
- SRP: только значения по умолчанию, допустимые диапазоны и настройка логов.
- Общие для CLI и студии: слайдеры и argparse берут границы отсюда.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple


VERSION = "0.1.0"


class IdenticonConfigError(ValueError):
    """Недопустимая комбинация параметров (размер, сетка, отступ, яркость)."""


# =============================================================================
# Цвет
# =============================================================================

@dataclass(frozen=True)
class BrightnessBand:
    """Диапазон яркости каналов: не слишком тёмный и не сливается с фоном."""
    min: int = 50
    max: int = 200


BRIGHTNESS = BrightnessBand()

BACKGROUND: Tuple[int, int, int] = (255, 255, 255)

# bytes 0..2 of the digest go to color, pattern bits start after them
COLOR_BYTES = 3

# =============================================================================
# Диапазоны параметров
# =============================================================================

@dataclass(frozen=True)
class Bounds:
    """Рекомендуемый диапазон [low, high] и значение по умолчанию."""
    low: int
    high: int
    default: int

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high


IMAGE_SIZE = Bounds(low=50, high=2000, default=420)
GRID_SIZE = Bounds(low=3, high=15, default=5)
PADDING = Bounds(low=0, high=25, default=8)

# =============================================================================
# Имена файлов
# =============================================================================

MAX_NAME_BYTES = 64
OUTPUT_SUFFIX = ".png"

# =============================================================================
# Логи
# =============================================================================

LOG_FORMAT = "%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Настраивает корневой логгер один раз для CLI и студии."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
