from typing import Optional

import structlog

from decaesar.errors import EmptyInputError
from decaesar.frequency import ALPHABET_SIZE
from decaesar.results import DecaesarResult, DecipherResult
from decaesar.scoring import DEFAULT_SCORER, Scorer
from decaesar.utils import BytesLike, as_bytes

log = structlog.get_logger()


def break_cipher(data: BytesLike | str, scorer: Optional[Scorer] = None) -> DecaesarResult:
    """
    Score every shift 0..25 of the input and pick the most English-like one.
    The reported shift is the one that decodes the input (see rotation.decode).
    Ties go to the lowest shift.
    """
    raw = as_bytes(data)
    if len(raw) == 0:
        raise EmptyInputError()

    if scorer is None:
        scorer = DEFAULT_SCORER
    best = DecipherResult(shift=0, score=float("-inf"))
    results = []

    for shift in range(ALPHABET_SIZE):
        result = DecipherResult(shift=shift, score=scorer.score(raw, shift))
        results.append(result)
        log.debug("shift scored", shift=shift, score=result.score)

        if result.score > best.score:
            best = result

    # Nothing compared greater than the sentinel, e.g. every score is NaN.
    if best.score == float("-inf"):
        best = results[0]

    log.info("cipher broken", input_len=len(raw), best_shift=best.shift, best_score=best.score)
    return DecaesarResult(best=best, results=tuple(results))
