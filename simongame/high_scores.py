"""Table of the best scores and the names that go with them."""

from __future__ import annotations

from dataclasses import dataclass

MAX_HIGH_SCORES = 5
MAX_NAME_LENGTH = 21


@dataclass
class HighScore:
    """One entry of the table."""

    name: str = ""
    score: int = 0


class HighScoreTable:
    """The highest scores, best first, with a fixed number of slots."""

    def __init__(self) -> None:
        self.entries = [HighScore() for _ in range(MAX_HIGH_SCORES)]

    def check(self, score: int) -> int | None:
        """Insert ``score`` if it beats an entry and return its index, else None."""
        if score <= self.entries[-1].score:
            return None
        index = next(i for i, entry in enumerate(self.entries) if score > entry.score)
        self.entries.insert(index, HighScore(score=score))
        del self.entries[MAX_HIGH_SCORES:]
        return index

    def set_name(self, index: int, name: str) -> None:
        """Name the entry at ``index``, keeping at most 20 characters."""
        self.entries[index].name = name[: MAX_NAME_LENGTH - 1]

    def lines(self) -> list[str]:
        """Return a "name score" line for every entry with a score."""
        return [f"{e.name} {e.score}" for e in self.entries if e.score > 0]