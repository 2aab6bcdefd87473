from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Set

from .charvec import in_alphabet, popcount, string_to_vector
from .puzzle import MINIMUM_WORD_LENGTH, POT_SIZE, Puzzle


def subvectors(vec: int) -> Iterator[int]:
    """Every subset of `vec`, from `vec` itself down to the empty set."""
    sub = vec
    while True:
        yield sub
        if not sub:
            return
        sub = (sub - 1) & vec


class PuzzleMaster:
    """Index of a word list by character vector, for solving puzzles.

    Only words of at least MINIMUM_WORD_LENGTH characters, made entirely of
    alphabet letters, with at most POT_SIZE distinct letters are kept.
    Building is a single pass over the input. Treat instances as read-only
    once constructed.
    """

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = []
        self.words_by_vector: Dict[int, List[str]] = {}
        self.pots: Set[int] = set()
        for word in words:
            if len(word) < MINIMUM_WORD_LENGTH:
                continue
            if not in_alphabet(word):
                continue
            vec = string_to_vector(word)
            distinct = popcount(vec)
            if distinct > POT_SIZE:
                continue
            self.words.append(word)
            self.words_by_vector.setdefault(vec, []).append(word)
            if distinct == POT_SIZE:
                self.pots.add(vec)
        self._accepted = frozenset(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self._accepted

    def __len__(self) -> int:
        return len(self.words)

    def solutions_to(self, puzzle: Puzzle) -> Set[str]:
        result: Set[str] = set()
        for sub in subvectors(puzzle.optional):
            bucket = self.words_by_vector.get(puzzle.required | sub)
            if bucket:
                result.update(bucket)
        return result

    def puzzles(self) -> List[Puzzle]:
        # One puzzle per (pot, required letter) pair.
        out: List[Puzzle] = []
        for pot in sorted(self.pots):
            rest = pot
            while rest:
                letter = rest & -rest
                out.append(Puzzle(required=letter, optional=pot ^ letter))
                rest ^= letter
        return out


def build(words: Iterable[str]) -> PuzzleMaster:
    return PuzzleMaster(words)


def solutions_to(index: PuzzleMaster, puzzle: Puzzle) -> Set[str]:
    return index.solutions_to(puzzle)
