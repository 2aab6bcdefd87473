from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from .charvec import popcount, sanitize, string_to_vector, vector_to_string

# Shortest word accepted as a solution.
MINIMUM_WORD_LENGTH = 5
# Number of letters a player may draw from.
POT_SIZE = 7
# A bingo uses every letter in the pot; anything else is worth one point.
BINGO_SCORE = 3


@dataclass(frozen=True)
class Puzzle:
    """A Spelling Bee puzzle over character vectors.

    `required` holds the letters every solution must use (usually one) and
    `optional` the other letters a solution may use. The two should be
    disjoint, but nothing here checks it.
    """
    required: int
    optional: int

    @property
    def pot(self) -> int:
        return self.required | self.optional

    @classmethod
    def from_letters(cls, required: str, optional: str) -> 'Puzzle':
        return cls(
            required=string_to_vector(sanitize(required)),
            optional=string_to_vector(sanitize(optional)),
        )

    def letters(self) -> tuple:
        return vector_to_string(self.required), vector_to_string(self.optional)

    def __str__(self) -> str:
        required, optional = self.letters()
        return f"Puzzle(required={required!r}, optional={optional!r})"


def distinct_letters(word: str) -> int:
    return popcount(string_to_vector(word))


def is_bingo(word: str) -> bool:
    return distinct_letters(word) >= POT_SIZE


def score(word: str) -> int:
    return BINGO_SCORE if is_bingo(word) else 1


def total_score(words: Iterable[str]) -> int:
    return sum(score(w) for w in words)


def sort_solutions(words: Iterable[str]) -> List[str]:
    # Bingos first, then alphabetical.
    return sorted(words, key=lambda w: (not is_bingo(w), w))
