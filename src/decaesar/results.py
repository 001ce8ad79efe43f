from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, MutableSequence, Tuple

from decaesar.frequency import ALPHABET_SIZE


@dataclass(frozen=True, slots=True)
class DecipherResult:
    """Outcome of scoring one candidate shift."""

    shift: int = 0
    score: float = 0.0

    def __str__(self) -> str:
        return f"Shift: {self.shift} Score: {self.score}"


def _by_score_descending(a: DecipherResult, b: DecipherResult) -> int:
    # Incomparable scores (NaN) compare equal.
    if a.score > b.score:
        return -1
    if a.score < b.score:
        return 1
    return 0


@dataclass(frozen=True, slots=True)
class DecaesarResult:
    """Best candidate plus the results for every shift, indexed by shift."""

    best: DecipherResult
    results: Tuple[DecipherResult, ...]

    def __post_init__(self):
        results = tuple(self.results)
        if len(results) != ALPHABET_SIZE:
            raise ValueError(f"Expected {ALPHABET_SIZE} results, got {len(results)}")
        for idx, result in enumerate(results):
            if result.shift != idx:
                raise ValueError(f"results[{idx}] has shift {result.shift}")

        if not 0 <= self.best.shift < ALPHABET_SIZE:
            raise ValueError(f"best has shift {self.best.shift}")
        entry = results[self.best.shift]
        if self.best is not entry and self.best != entry:
            raise ValueError(f"best ({self.best}) is not results[{self.best.shift}] ({entry})")
        object.__setattr__(self, "results", results)

    def best_of(self) -> DecipherResult:
        return self.best

    def rank_top_n(self, output: MutableSequence[DecipherResult], n: int) -> None:
        """
        Write the n highest scoring results into output, best first.
        Silently truncates to the size of output; slots past that are untouched.
        """
        ranked = sorted(self.results, key=cmp_to_key(_by_score_descending))
        k = min(n, len(output), len(ranked))
        for i in range(k):
            output[i] = ranked[i]

    def ranked(self, n: int = ALPHABET_SIZE) -> List[DecipherResult]:
        """Allocate and return the top n results, best first."""
        output = [DecipherResult() for _ in range(max(0, min(n, ALPHABET_SIZE)))]
        self.rank_top_n(output, n)
        return output


def best_of(result: DecaesarResult) -> DecipherResult:
    return result.best
