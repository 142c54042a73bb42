"""Rules of the typing game: spawning, moving and typing words."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from numberone.records import RecordManager

PathLike = Union[str, Path]

FIELD_WIDTH = 1080
FIELD_HEIGHT = 720
FONT_COUNT = 4
CHARACTER_SIZE = 25
SPAWN_INTERVAL = 2.0
DEFAULT_WORD_SPEED = 1.0
MAX_WORD_SPEED = 2.0
MIN_WORD_SPEED = 0.05
SPEED_STEP = 0.05
HIT_SPEED_BONUS = 0.01
HIT_DROP_SPEED = 3.0
POINTS_PER_WORD = 10
PLAYER_NAME = "Player1"
BACKSPACE = "\b"


@dataclass
class FallingWord:
    """A word on the field; moves by ``speed`` and ``y_speed`` each frame."""

    text: str
    y: float
    speed: float
    x: float = 0.0
    y_speed: float = 0.0
    font_index: int = 0

    @property
    def hit(self) -> bool:
        """True once the word was typed and has started to drop."""
        return self.speed == 0 and self.y_speed > 0


@dataclass
class TypingGame:
    """State of one round: words crossing the field and what the player typed."""

    vocabulary: list[str]
    field_width: int
    field_height: int
    rng: random.Random
    score_file: Optional[Path]
    font_count: int
    falling: list[FallingWord] = field(default_factory=list)
    user_input: str = ""
    word_speed: float = DEFAULT_WORD_SPEED
    font_index: int = 0
    paused: bool = False
    game_over: bool = False
    records: RecordManager = field(default_factory=lambda: RecordManager(PLAYER_NAME, 0))
    _timer: float = 0.0

    def __init__(
        self,
        words: Iterable[str],
        field_width: int = FIELD_WIDTH,
        field_height: int = FIELD_HEIGHT,
        rng: Optional[random.Random] = None,
        score_file: Optional[PathLike] = None,
        font_count: int = FONT_COUNT,
    ) -> None:
        vocabulary = list(words)
        if not vocabulary:
            raise ValueError("the word list is empty")
        if field_height <= CHARACTER_SIZE * 2:
            raise ValueError(f"field height must exceed {CHARACTER_SIZE * 2}")
        if font_count < 1:
            raise ValueError("at least one font is required")
        self.vocabulary = vocabulary
        self.field_width = field_width
        self.field_height = field_height
        self.rng = rng if rng is not None else random.Random()
        self.score_file = Path(score_file) if score_file is not None else None
        self.font_count = font_count
        self.falling = []
        self.user_input = ""
        self.word_speed = DEFAULT_WORD_SPEED
        self.font_index = 0
        self.paused = False
        self.game_over = False
        self.records = RecordManager(PLAYER_NAME, 0)
        self._timer = 0.0

    @property
    def score(self) -> int:
        return self.records.score

    def toggle_pause(self) -> bool:
        """Pause or resume the game and return the new paused state."""
        self.paused = not self.paused
        return self.paused

    def cycle_font(self) -> int:
        """Switch to the next font, wrapping around; return its index."""
        self.font_index = (self.font_index + 1) % self.font_count
        return self.font_index

    def speed_up(self) -> float:
        """Raise the speed of new words, up to the maximum, unless paused."""
        if not self.paused:
            self.word_speed = min(MAX_WORD_SPEED, self.word_speed + SPEED_STEP)
        return self.word_speed

    def slow_down(self) -> float:
        """Lower the speed of new words, down to the minimum, unless paused."""
        if not self.paused:
            self.word_speed = max(MIN_WORD_SPEED, self.word_speed - SPEED_STEP)
        return self.word_speed

    def type_char(self, char: str) -> bool:
        """Handle one typed character; return True if it completed a word.

        Backspace removes the last character, ASCII letters are appended,
        anything else is ignored. Input is ignored while paused.
        """
        if self.paused:
            return False
        if char == BACKSPACE:
            self.user_input = self.user_input[:-1]
        elif len(char) == 1 and char.isascii() and char.isalpha():
            self.user_input += char

        matched = False
        for word in self.falling:
            if word.text == self.user_input:
                word.speed = 0.0
                word.y_speed = HIT_DROP_SPEED
                self.user_input = ""
                self.records.add_points(POINTS_PER_WORD)
                if self.score_file is not None:
                    self.records.save_to_file(self.score_file)
                self.word_speed += HIT_SPEED_BONUS
                matched = True
        return matched

    def spawn_word(self) -> FallingWord:
        """Put a random word at the left edge at a random height."""
        text = self.rng.choice(self.vocabulary)
        y = float(self.rng.randrange(self.field_height - CHARACTER_SIZE * 2))
        word = FallingWord(text=text, y=y, speed=self.word_speed, font_index=self.font_index)
        self.falling.append(word)
        return word

    def update(self, elapsed: float) -> None:
        """Advance one frame that took ``elapsed`` seconds.

        A new word appears every two seconds; every word moves by its
        speeds. A word still travelling that reaches the right edge ends
        the game. Nothing moves while paused.
        """
        self._timer += elapsed
        if self.paused:
            return
        if self._timer >= SPAWN_INTERVAL:
            self._timer = 0.0
            self.spawn_word()
        for word in self.falling:
            word.x += word.speed
            word.y += word.y_speed
            if word.speed > 0 and word.x >= self.field_width:
                self.game_over = True
                break