from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tui_tetris.config import DEFAULT_CONFIG, ParseError, parse_config, serialize_config
from tui_tetris.game import PieceBag


logger = logging.getLogger("tui_tetris")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tui-tetris-config")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = p.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="validate a config file")
    check.add_argument("path", type=Path)

    sub.add_parser("default", help="print the default config file")

    bag = sub.add_parser("bag", help="print pieces from the 7-bag randomizer")
    bag.add_argument("--seed", type=int, default=None)
    bag.add_argument("--count", type=int, default=14)
    return p


def _check(path: Path) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to read config file %s: %s", path, exc)
        return 2
    try:
        config = parse_config(text)
    except ParseError as exc:
        print(exc)
        return 1
    print(
        f"{path}: ok ({config.mode} mode, {config.board_width}x{config.board_height} board, "
        f"{config.fps} fps)"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    if args.command == "check":
        return _check(args.path)
    if args.command == "default":
        sys.stdout.write(serialize_config(DEFAULT_CONFIG))
        return 0
    if args.count < 0:
        logger.error("--count must be non-negative")
        return 2
    bag = PieceBag(seed=args.seed)
    print(" ".join(bag.next_piece().name for _ in range(args.count)))
    return 0


def run() -> None:  # pragma: no cover
    sys.exit(main())
