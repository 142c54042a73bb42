"""Moving words for the typing game and word-list loading."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

PathLike = Union[str, Path]

MOVE_SPEED = 200.0
DROP_SPEED = 300.0
Y_MIN = 50.0
Y_MAX = 620.0
CHARACTER_SIZE = 30


@dataclass
class Word:
    """A word on the playing field with its position and state."""

    text: str
    y: float
    x: float = 0.0
    active: bool = True
    hit: bool = False


class WordGenerator:
    """Places words at random heights and moves them across the field.

    Active words travel to the right; words that were typed correctly
    stop and fall down.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.move_speed = MOVE_SPEED
        self.drop_speed = DROP_SPEED
        self.character_size = CHARACTER_SIZE
        self.words = [Word(text, self.rng.uniform(Y_MIN, Y_MAX)) for text in words]

    def update_movement(self, delta_time: float) -> None:
        """Advance every word by ``delta_time`` seconds."""
        for word in self.words:
            if word.active:
                word.x += self.move_speed * delta_time
            elif word.hit:
                word.y += self.drop_speed * delta_time

    def check_word_match(self, typed: str) -> bool:
        """Mark the first active word equal to ``typed`` as hit."""
        for word in self.words:
            if word.active and word.text == typed:
                word.active = False
                word.hit = True
                return True
        return False


def load_word_list(path: PathLike) -> list[str]:
    """Return the whitespace-separated words stored in ``path``."""
    return Path(path).read_text(encoding="utf-8").split()