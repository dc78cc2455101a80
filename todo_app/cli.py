#!/usr/bin/env python3
"""
TO-DO APP - CLI Interface
=========================
Interactive, in-memory to-do list manager.

Usage:
    todo-app
    todo-app --no-color
    todo-app --log-level INFO
    python -m todo_app
"""

import argparse
import logging
import sys
from typing import List, Optional

import colorama
from pydantic import ValidationError

from .config import AppConfig
from .menu import MenuController
from .presentation import Theme
from .prompts import Prompter

logger = logging.getLogger("todo_app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-app",
        description="Interactive to-do list manager (items live in memory only)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo-app                      Start an interactive session
  todo-app --no-color           Plain output, no ANSI colours
  todo-app --log-level INFO     Log item changes to stderr
        """
    )
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Environment first, then CLI flags"""
    config = AppConfig.from_env()
    overrides = {}
    if args.no_color:
        overrides["color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        config = AppConfig(**{**config.model_dump(), **overrides})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )
    if config.color:
        colorama.init()

    theme = Theme(enabled=config.color)
    controller = MenuController(Prompter(theme), theme)

    try:
        return controller.run()
    except EOFError:
        logger.error("❌ Input stream closed")
        print("❌ Input stream closed, cannot continue", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"❌ Terminal I/O failed: {e}")
        print(f"❌ Terminal I/O failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
