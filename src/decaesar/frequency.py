from typing import Tuple, Union

ALPHABET_SIZE = 26
BIGRAM_BONUS = 20.0

# Relative frequency of each letter in English text, A..Z.
LETTER_WEIGHTS: Tuple[float, ...] = (
    8.12,   # A
    1.49,   # B
    2.71,   # C
    4.32,   # D
    12.02,  # E
    2.30,   # F
    2.03,   # G
    5.92,   # H
    7.31,   # I
    0.10,   # J
    0.69,   # K
    3.98,   # L
    2.61,   # M
    6.95,   # N
    7.68,   # O
    1.82,   # P
    0.11,   # Q
    6.02,   # R
    6.28,   # S
    9.10,   # T
    2.88,   # U
    1.11,   # V
    2.09,   # W
    0.17,   # X
    2.11,   # Y
    0.07,   # Z
)

# Most common English letter pairs, as lowercase byte values.
COMMON_BIGRAMS: Tuple[Tuple[int, int], ...] = tuple(
    (pair[0], pair[1])
    for pair in (
        b"th", b"he", b"in", b"er", b"an",
        b"re", b"on", b"at", b"en", b"nd",
        b"st", b"to", b"es", b"of", b"is",
        b"it", b"as", b"al", b"ar", b"le",
    )
)

type Letter = Union[int, str, bytes]


def letter_index(letter: Letter) -> int:
    """Map an ASCII letter (any case) to 0..25."""
    if isinstance(letter, (str, bytes)):
        if len(letter) != 1:
            raise ValueError(f"Expected a single letter, got {letter!r}")
        letter = ord(letter)

    if ord("a") <= letter <= ord("z"):
        return letter - ord("a")
    if ord("A") <= letter <= ord("Z"):
        return letter - ord("A")
    raise ValueError(f"Not an ASCII letter: {letter!r}")


def letter_weight(letter: Letter) -> float:
    """ Frequency weight of a letter, e.g. E is 12.02 and Z is 0.07. """
    return LETTER_WEIGHTS[letter_index(letter)]


def common_bigrams() -> Tuple[Tuple[int, int], ...]:
    return COMMON_BIGRAMS
