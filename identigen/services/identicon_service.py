"""Полный конвейер: seed -> дайджест -> цвет и узор -> изображение.

Принципы:
- SRP: только композиция этапов; каждый этап — отдельный сервис.
- DIP: этапы передаются в конструктор, по умолчанию — стандартные реализации.
"""
from __future__ import annotations

import logging
from typing import Optional

from identigen.config import GRID_SIZE, IMAGE_SIZE, PADDING
from identigen.models.identicon_model import Identicon, IdenticonParams
from identigen.services.digest_service import DigestService
from identigen.services.pattern_service import PatternService
from identigen.services.render_service import RenderService

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = IdenticonParams(
    image_size=IMAGE_SIZE.default,
    grid_size=GRID_SIZE.default,
    padding_percent=PADDING.default,
)


class IdenticonService:
    def __init__(
        self,
        digest_service: Optional[DigestService] = None,
        pattern_service: Optional[PatternService] = None,
        render_service: Optional[RenderService] = None,
    ) -> None:
        self._digests = digest_service or DigestService()
        self._patterns = pattern_service or PatternService()
        self._renderer = render_service or RenderService()

    def create_identicon(self, seed: str, params: IdenticonParams = DEFAULT_PARAMS) -> Identicon:
        """Генерирует identicon для seed.

        Args:
            seed: Произвольная строка, в том числе пустая.
            params: Размер изображения, сетки и отступ.

        Returns:
            `Identicon` с дайджестом, цветом, сеткой и изображением PIL.

        Raises:
            IdenticonConfigError: если параметры не оставляют места для сетки.
        """
        # validate geometry before hashing so bad params fail fast
        self._renderer.compute_layout(params.image_size, params.grid_size, params.padding_percent)

        digest = self._digests.derive_digest(seed)
        color = self._patterns.derive_color(digest)
        grid = self._patterns.derive_grid(digest, params.grid_size)
        image = self._renderer.rasterize(color, grid, params.image_size, params.padding_percent)

        logger.debug("Identicon %s: color=%s params=%s", digest.hex()[:12], color.hex, params)
        return Identicon(seed=seed, digest=digest, color=color, grid=grid, params=params, image=image)
