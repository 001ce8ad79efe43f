"""
Plausibility scoring of a candidate shift against English letter statistics.

A scorer rotates every byte of the input by the candidate shift and adds up
letter-frequency weights, plus a flat bonus each time two adjacent letters
form one of the common English bigrams. Non-letters contribute nothing and
break any bigram across them.
"""
from typing import Optional, Protocol, Sequence, Tuple

from decaesar.frequency import ALPHABET_SIZE, BIGRAM_BONUS, COMMON_BIGRAMS, LETTER_WEIGHTS
from decaesar.rotation import LOWER_A, LOWER_Z, UPPER_A, UPPER_Z, rotate_byte
from decaesar.utils import BytesLike

# Marks "no previous letter"; never equal to a lowercase letter byte.
NO_LETTER = 0


class Scorer(Protocol):
    """Anything that can rate how English-like the input looks after a shift."""

    def score(self, data: BytesLike, shift: int) -> float: ...


class FrequencyScorer:
    """
    Default scorer using single-letter weights and a common bigram table.
    Alternative language models can pass their own tables.
    """

    def __init__(
        self,
        letter_weights: Sequence[float] = LETTER_WEIGHTS,
        bigrams: Sequence[Tuple[int, int]] = COMMON_BIGRAMS,
        bigram_bonus: float = BIGRAM_BONUS,
    ):
        if len(letter_weights) != ALPHABET_SIZE:
            raise ValueError(f"Expected {ALPHABET_SIZE} letter weights, got {len(letter_weights)}")
        if any(w < 0 for w in letter_weights):
            raise ValueError("Letter weights must be non-negative")
        if len(set(bigrams)) != len(bigrams):
            raise ValueError("Bigram table contains duplicate pairs")
        if bigram_bonus < 0:
            raise ValueError("Bigram bonus must be non-negative")

        self.letter_weights = tuple(letter_weights)
        self.bigrams = tuple(bigrams)
        self.bigram_bonus = bigram_bonus

    def score(self, data: BytesLike, shift: int) -> float:
        score = 0.0
        previous = NO_LETTER

        for b in data:
            if UPPER_A <= b <= UPPER_Z:
                b += LOWER_A - UPPER_A
            shifted = rotate_byte(b, shift)

            # Full scan; pairs are unique so at most one can match.
            for first, second in self.bigrams:
                if previous == first and shifted == second:
                    score += self.bigram_bonus

            if LOWER_A <= shifted <= LOWER_Z:
                score += self.letter_weights[shifted - LOWER_A]
                previous = shifted
            else:
                previous = NO_LETTER

        return score


DEFAULT_SCORER = FrequencyScorer()


def score_shift(data: BytesLike, shift: int, scorer: Optional[Scorer] = None) -> float:
    """Score one shift of the input with the given (or default) scorer."""
    if scorer is None:
        scorer = DEFAULT_SCORER
    return scorer.score(data, shift)
