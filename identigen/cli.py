"""
identigen/cli.py
Командная строка: identicon из seed-строки в PNG.

Usage:
    identigen alice
    identigen alice@example.com -o avatar.png -s 256 -g 7 -p 10
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from identigen.config import (
    GRID_SIZE,
    IMAGE_SIZE,
    PADDING,
    VERSION,
    Bounds,
    IdenticonConfigError,
    setup_logging,
)
from identigen.models.identicon_model import IdenticonParams
from identigen.services.identicon_service import IdenticonService
from identigen.services.image_service import ImageService

logger = logging.getLogger(__name__)


def _bounded(bounds: Bounds) -> Callable[[str], int]:
    """argparse-тип: целое в диапазоне [low, high]."""
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"не целое число: {text!r}")
        if not bounds.contains(value):
            raise argparse.ArgumentTypeError(
                f"{value} вне диапазона {bounds.low}..{bounds.high}"
            )
        return value
    return parse


def _seed(text: str) -> str:
    """argparse-тип: seed должен кодироваться в UTF-8 (без суррогатов из argv)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError("seed не является корректной строкой UTF-8")
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identigen",
        description="Генерация identicon из хеша seed-строки",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    parser.add_argument("seed", type=_seed, help="Seed (имя пользователя, email и т.п.)")
    parser.add_argument(
        "--output", "-o", type=str,
        help="Путь к PNG [по умолчанию: <seed>.png или <sha256>.png]",
    )
    parser.add_argument(
        "--size", "-s", dest="image_size", type=_bounded(IMAGE_SIZE), default=IMAGE_SIZE.default,
        help=f"Размер изображения, px ({IMAGE_SIZE.low}..{IMAGE_SIZE.high})",
    )
    parser.add_argument(
        "--grid", "-g", dest="grid_size", type=_bounded(GRID_SIZE), default=GRID_SIZE.default,
        help=f"Размер сетки узора ({GRID_SIZE.low}..{GRID_SIZE.high})",
    )
    parser.add_argument(
        "--padding", "-p", type=_bounded(PADDING), default=PADDING.default,
        help=f"Отступ, %% от размера ({PADDING.low}..{PADDING.high})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Отладочные логи")
    return parser


def run(args: argparse.Namespace) -> int:
    """Генерирует и сохраняет identicon по разобранным аргументам."""
    images = ImageService()
    output_path = Path(args.output) if args.output else images.default_output_path(args.seed)
    params = IdenticonParams(
        image_size=args.image_size,
        grid_size=args.grid_size,
        padding_percent=args.padding,
    )

    print(f"Generating identicon for seed: {args.seed}")
    try:
        identicon = IdenticonService().create_identicon(args.seed, params)
    except IdenticonConfigError as exc:
        logger.error("Failed to generate identicon: %s", exc)
        return 1

    try:
        images.save_image(identicon.image, output_path)
    except OSError as exc:
        logger.error("Failed to save image: %s", exc)
        return 1

    print(f"Identicon saved to: {output_path}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
