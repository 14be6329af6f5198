# analysis/injection.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from crc_lab.errors import InvalidInput
from crc_lab.protocol.crc import verify
from crc_lab.protocol.registry import PolynomialConfig
from crc_lab.utils.bitops import array_to_bits, bits_to_array, validate_bits


@dataclass(frozen=True)
class ErrorAnalysis:
    """
    corrupted: codeword after the errors were applied
    remainder: verify() remainder of the corrupted word
    detected:  remainder is non-zero
    """
    corrupted: str
    remainder: str
    detected: bool


def _positions_array(positions: Iterable[int], length: int) -> np.ndarray:
    """
    Validate every position, then keep only those below `length`.
    Range filtering happens on Python ints so arbitrarily large positions
    never reach the int64 conversion.
    """
    pos = list(positions)
    for p in pos:
        if not isinstance(p, (int, np.integer)) or isinstance(p, bool):
            raise TypeError(f"bit position must be int, got {type(p).__name__}")
        if p < 0:
            raise InvalidInput(f"bit position must be non-negative: {p}")
    return np.asarray([p for p in pos if p < length], dtype=np.int64)


def error_mask(length: int, positions: Iterable[int]) -> np.ndarray:
    """
    uint8 flip mask of `length` bits for an error pattern.

    Each position is counted and only odd counts flip, so a position listed
    twice cancels. Positions >= length are dropped.
    """
    pos = _positions_array(positions, length)
    return (np.bincount(pos, minlength=length)[:length] & 1).astype(np.uint8)


def inject_errors(codeword: str, positions: Iterable[int]) -> str:
    """
    Return a copy of `codeword` with the bit at every position flipped.

    Out-of-range positions (>= len(codeword)) are ignored rather than
    rejected. Negative positions are not skipped: they raise InvalidInput.
    """
    validate_bits(codeword, allow_empty=True)
    bits = bits_to_array(codeword)
    return array_to_bits(bits ^ error_mask(bits.size, positions))


def apply_error_vector(codeword: str, vector: str, *, offset: int = 0) -> str:
    """
    Modulo-2 add `vector` into `codeword`, its first bit aligned at `offset`
    (counted from the MSB).
    """
    validate_bits(codeword)
    validate_bits(vector)
    if not isinstance(offset, int) or offset < 0:
        raise InvalidInput(f"offset must be a non-negative int: {offset!r}")
    if offset + len(vector) > len(codeword):
        raise InvalidInput(
            f"error vector of {len(vector)} bits at offset {offset} does not fit "
            f"a {len(codeword)}-bit codeword"
        )
    bits = bits_to_array(codeword).copy()
    bits[offset:offset + len(vector)] ^= bits_to_array(vector)
    return array_to_bits(bits)


def analyze_errors(codeword: str, positions: Iterable[int], config: PolynomialConfig) -> ErrorAnalysis:
    """Flip `positions` in `codeword` and report whether the CRC catches it."""
    corrupted = inject_errors(codeword, positions)
    res = verify(corrupted, config)
    return ErrorAnalysis(corrupted=corrupted, remainder=res.remainder, detected=not res.is_valid)
