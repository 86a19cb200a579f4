"""Точка входа студии.

Usage:
    identigen-studio
    identigen-studio alice -v
    identigen-studio -- -v
"""
from __future__ import annotations

import argparse
from typing import Optional

from identigen.cli import _seed
from identigen.config import VERSION, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identigen-studio",
        description="Интерактивная студия identicon",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    parser.add_argument(
        "seed", nargs="?", type=_seed, default="",
        help="Начальный seed (пусто по умолчанию)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Отладочные логи")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Создаёт и запускает главное окно."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    # окно тянет customtkinter, разбор аргументов без него
    from identigen.app import IdenticonStudioApp

    app = IdenticonStudioApp(seed=args.seed)
    app.mainloop()


if __name__ == "__main__":
    main()
