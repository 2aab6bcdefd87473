from __future__ import annotations
import random
from typing import Callable, Collection, Dict, List, Optional, Set

from .puzzle import Puzzle, total_score
from .puzzle_master import PuzzleMaster

# Inclusive bounds on the maximum score of a generated puzzle.
SCORE_LOWER_BOUND = 14
SCORE_UPPER_BOUND = 28

# Higher accessibility means an easier puzzle.
AccessibilityEstimator = Callable[[Puzzle, Collection[str]], float]


def score_accessibility(puzzle: Puzzle, solutions: Collection[str]) -> float:
    return float(total_score(solutions))


def solution_count_accessibility(puzzle: Puzzle, solutions: Collection[str]) -> float:
    return float(len(solutions))


ESTIMATORS: Dict[str, AccessibilityEstimator] = {
    'score': score_accessibility,
    'solution-count': solution_count_accessibility,
}


def max_score(index: PuzzleMaster, puzzle: Puzzle) -> int:
    return total_score(index.solutions_to(puzzle))


def solve_all(index: PuzzleMaster, puzzles: List[Puzzle]) -> Dict[Puzzle, Set[str]]:
    return {p: index.solutions_to(p) for p in puzzles}


def in_score_range(puzzles: List[Puzzle], solutions: Dict[Puzzle, Set[str]],
                   lower: int = SCORE_LOWER_BOUND, upper: int = SCORE_UPPER_BOUND) -> List[Puzzle]:
    return [p for p in puzzles if lower <= total_score(solutions[p]) <= upper]


def one_per_pot(puzzles: List[Puzzle], rng: random.Random) -> List[Puzzle]:
    by_pot: Dict[int, List[Puzzle]] = {}
    for p in puzzles:
        by_pot.setdefault(p.pot, []).append(p)
    return [rng.choice(group) for group in by_pot.values()]


def by_accessibility(puzzles: List[Puzzle], solutions: Dict[Puzzle, Set[str]],
                     estimator: AccessibilityEstimator = score_accessibility) -> List[Puzzle]:
    # Most accessible first
    return sorted(puzzles, key=lambda p: estimator(p, solutions[p]), reverse=True)


def shuffle_thirds(puzzles: List[Puzzle], rng: random.Random) -> List[Puzzle]:
    """Shuffle within the easy, medium and hard thirds, keeping the thirds apart."""
    step = len(puzzles) // 3
    bounds = [(0, step), (step, 2 * step), (2 * step, len(puzzles))]
    out: List[Puzzle] = []
    for start, stop in bounds:
        part = puzzles[start:stop]
        rng.shuffle(part)
        out.extend(part)
    return out


def generate(index: PuzzleMaster, estimator: AccessibilityEstimator = score_accessibility,
             lower: int = SCORE_LOWER_BOUND, upper: int = SCORE_UPPER_BOUND,
             seed: Optional[int] = 0) -> List[Puzzle]:
    """Pick a pool of puzzles, easiest third first.

    Only puzzles whose maximum score lies in [lower, upper] are kept, with at
    most one per pot, ordered by decreasing accessibility and then shuffled
    within each third.
    """
    rng = random.Random(seed)
    candidates = index.puzzles()
    solutions = solve_all(index, candidates)
    pool = one_per_pot(in_score_range(candidates, solutions, lower, upper), rng)
    return shuffle_thirds(by_accessibility(pool, solutions, estimator), rng)
