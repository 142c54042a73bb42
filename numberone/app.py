"""Command-line entry point of the typing game."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import pygame

from numberone.screens import Assets, run_menu


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game at its menu and return the exit status."""
    parser = argparse.ArgumentParser(prog="numberone", description="Typing game.")
    parser.add_argument(
        "--assets",
        default="../Assets",
        help="directory holding fonts, images, word lists and records",
    )
    args = parser.parse_args(argv)
    try:
        run_menu(Assets(Path(args.assets)))
    finally:
        pygame.quit()
    return 0