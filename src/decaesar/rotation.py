from typing import MutableSequence

from decaesar.errors import EmptyInputError, InvalidShiftError, OutputTooSmallError
from decaesar.frequency import ALPHABET_SIZE
from decaesar.utils import BytesLike, as_bytes

LOWER_A = ord("a")
LOWER_Z = ord("z")
UPPER_A = ord("A")
UPPER_Z = ord("Z")


def rotate_byte(b: int, shift: int) -> int:
    """Rotate an ASCII letter forward by shift, preserving case. Other bytes pass through."""
    if LOWER_A <= b <= LOWER_Z:
        return (b - LOWER_A + shift) % ALPHABET_SIZE + LOWER_A
    if UPPER_A <= b <= UPPER_Z:
        return (b - UPPER_A + shift) % ALPHABET_SIZE + UPPER_A
    return b


def check_shift(shift: int) -> int:
    if not 0 <= shift < ALPHABET_SIZE:
        raise InvalidShiftError(shift)
    return shift


def transform(data: BytesLike, output: MutableSequence[int], shift: int) -> None:
    """
    Rotate every byte of data by shift and write it into output.
    Bytes past len(data) in output are left as they were.
    """
    if len(data) == 0:
        raise EmptyInputError()

    if len(output) < len(data):
        raise OutputTooSmallError(required=len(data), provided=len(output))

    check_shift(shift)

    for i, b in enumerate(data):
        output[i] = rotate_byte(b, shift)


def decode(data: BytesLike | str, shift: int) -> bytes:
    """ Apply a known decoding shift and return the result as new bytes. """
    raw = as_bytes(data)
    output = bytearray(len(raw))
    transform(raw, output, shift)
    return bytes(output)


def encode(data: BytesLike | str, shift: int) -> bytes:
    """ Encode with a key, so that break_cipher() on the result reports that same key. """
    check_shift(shift)
    return decode(data, (ALPHABET_SIZE - shift) % ALPHABET_SIZE)
