"""Player score keeping and the high-score table."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, Path]

DEFAULT_RECORDS_LIMIT = 10


@dataclass
class PlayerRecord:
    """One line of the records file: a player name and a score."""

    name: str
    score: int


class RecordManager:
    """Keeps the running score of one player and persists it."""

    def __init__(self, player_name: str, score: int = 0) -> None:
        self.player_name = player_name
        self.score = score

    def add_points(self, points: int) -> int:
        """Add ``points`` to the score and return the new total."""
        self.score += points
        return self.score

    def save_to_file(self, path: PathLike) -> None:
        """Append ``name score`` as a new line to the records file."""
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"{self.player_name} {self.score}\n")

    def load_from_file(self, path: PathLike) -> None:
        """Read the first name and score stored in the file.

        Raises ``OSError`` when the file cannot be read and ``ValueError``
        when it does not start with a name followed by an integer score.
        """
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        if len(tokens) < 2:
            raise ValueError(f"no record found in {path}")
        name, raw_score = tokens[0], tokens[1]
        try:
            score = int(raw_score)
        except ValueError:
            raise ValueError(f"invalid score {raw_score!r} in {path}") from None
        self.player_name = name
        self.score = score


def _parse_records(text: str) -> Iterator[PlayerRecord]:
    tokens = iter(text.split())
    for name in tokens:
        raw_score = next(tokens, None)
        if raw_score is None:
            return
        try:
            score = int(raw_score)
        except ValueError:
            return
        yield PlayerRecord(name, score)


def load_records(path: PathLike, limit: int = DEFAULT_RECORDS_LIMIT) -> list[PlayerRecord]:
    """Return the best ``limit`` records from the file, highest score first.

    Reading stops at the first entry that is not a name followed by an
    integer score. A file that cannot be opened yields an empty list.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    records = sorted(_parse_records(text), key=lambda record: record.score, reverse=True)
    return records[:limit]