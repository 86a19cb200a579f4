"""Сохранение identicon в PNG и загрузка с диска.

Принципы:
- SRP: класс отвечает только за файлы и имена файлов, пиксели не трогает.
- OCP: другие форматы можно добавить отдельными методами.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from identigen.config import MAX_NAME_BYTES, OUTPUT_SUFFIX
from identigen.models.identicon_model import SavedImage
from identigen.services.digest_service import DigestService

logger = logging.getLogger(__name__)


def _is_safe_name(seed: str) -> bool:
    return (
        bool(seed)
        and len(seed.encode("utf-8")) <= MAX_NAME_BYTES
        and all(ch.isalnum() or ch in "_-" for ch in seed)
    )


class ImageService:
    def __init__(self, digest_service: Optional[DigestService] = None) -> None:
        self._digests = digest_service or DigestService()

    def default_output_path(self, seed: str, directory: str | Path = ".") -> Path:
        """Имя файла по умолчанию для seed.

        Короткий seed из букв, цифр, `_` и `-` используется как есть,
        остальные (включая пустой) заменяются hex SHA-256.
        """
        name = seed if _is_safe_name(seed) else self._digests.digest_hex(seed)
        return Path(directory) / f"{name}{OUTPUT_SUFFIX}"

    def save_image(self, image: Image.Image, file_path: str | Path) -> SavedImage:
        """Сохраняет изображение в PNG и возвращает его метаданные.

        Raises:
            OSError: если файл не удалось записать.
        """
        path = Path(file_path)
        image.save(path, format="PNG")
        logger.info("Saved %dx%d image to %s", image.width, image.height, path)
        return self._describe(path, image)

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Загружает изображение с диска в режиме RGB.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as img:
                return img.convert("RGB")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

    def _describe(self, path: Path, image: Image.Image) -> SavedImage:
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return SavedImage(
            path=path,
            width=image.width,
            height=image.height,
            mode=image.mode,
            size_bytes=size_bytes,
        )
