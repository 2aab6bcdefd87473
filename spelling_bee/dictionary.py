from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .charvec import in_alphabet, popcount, string_to_vector
from .puzzle import (
    MINIMUM_WORD_LENGTH, POT_SIZE, Puzzle, is_bingo, score, sort_solutions, total_score,
)
from .puzzle_master import PuzzleMaster
from .schemas import PuzzleRequest, Solution, SolveResult, WordInspection, WordListReference

logger = logging.getLogger(__name__)

STANDARD_WORD_LISTS = [
    ('ubuntu-wamerican-7.1-1', 'Standard dictionary (99K words)',
     'words-ubuntu-wamerican-7.1-1.txt'),
    ('redhat-words-3.0-22.el7.noarch.txt', 'Large dictionary (479K words, some questionable)',
     'words-redhat-words-3.0-22.el7.noarch.txt'),
]


@dataclass
class WordData:
    id: str
    name: str
    words: List[str]
    puzzle_master: PuzzleMaster
    _word_set: frozenset = field(init=False, repr=False)

    def __post_init__(self):
        self._word_set = frozenset(self.words)

    def contains(self, word: str) -> bool:
        return word in self._word_set


def standard_word_lists(words_dir: Path) -> List[WordListReference]:
    return [
        WordListReference(id=list_id, name=name, path=str(Path(words_dir) / filename))
        for list_id, name, filename in STANDARD_WORD_LISTS
    ]


def parse_word_list(text: str) -> List[str]:
    # One word per line; blank lines dropped, everything else kept as-is
    return [line for line in text.split('\n') if line]


def read_word_list(path: str | Path) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_word_list(f.read())


def build_word_data(reference: WordListReference, words: List[str]) -> WordData:
    master = PuzzleMaster(words)
    logger.info("Indexed word list %s: %d words, %d accepted, %d pots",
                reference.id, len(words), len(master), len(master.pots))
    return WordData(id=reference.id, name=reference.name, words=words, puzzle_master=master)


class DictionaryService:
    def solve(self, word_data: WordData, request: PuzzleRequest) -> SolveResult:
        puzzle = Puzzle.from_letters(request.required, request.optional)
        found = sort_solutions(word_data.puzzle_master.solutions_to(puzzle))
        required, optional = puzzle.letters()
        return SolveResult(
            required=required,
            optional=optional,
            solutions=[Solution(word=w, score=score(w), isBingo=is_bingo(w)) for w in found],
            count=len(found),
            totalScore=total_score(found),
        )

    def inspect(self, word_data: WordData, word: str) -> Optional[WordInspection]:
        word = word.strip()
        if not word:
            return None
        if not word_data.contains(word):
            return WordInspection(word=word, inWordList=False, length=len(word))
        report = WordInspection(
            word=word,
            inWordList=True,
            validInPuzzle=word in word_data.puzzle_master,
            length=len(word),
        )
        if not in_alphabet(word):
            report.outsideAlphabet = True
            return report
        report.tooShort = len(word) < MINIMUM_WORD_LENGTH
        distinct = popcount(string_to_vector(word))
        report.distinctLetters = distinct
        if distinct < POT_SIZE:
            report.letterCount = 'below-pot'
        elif distinct > POT_SIZE:
            report.letterCount = 'above-pot'
        else:
            report.letterCount = 'full-pot'
        return report

# Singleton instance
service = DictionaryService()
