# utils/bitops.py
from __future__ import annotations

import numpy as np

from crc_lab.errors import InvalidInput

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def validate_bits(bits: str, *, allow_empty: bool = False) -> str:
    """
    Check that `bits` is a BitSequence: a str of '0'/'1', MSB first.
    Returns it unchanged so callers can validate inline.
    """
    if not isinstance(bits, str):
        raise TypeError("bits must be str")
    if not bits and not allow_empty:
        raise InvalidInput("bits is empty")
    if bits.strip("01"):
        raise InvalidInput("bits must contain only 0/1")
    return bits


def hex_to_binary(text: str) -> str:
    """
    Hex text -> BitSequence. Case-insensitive, optional 0x prefix.

    Every hex digit maps to exactly 4 bits, so leading zero digits are kept:
      hex_to_binary("0A") == "00001010"
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")
    h = text.strip()
    if h[:2].lower() == "0x":
        h = h[2:]
    if not h:
        raise InvalidInput("hex text is empty")
    if not set(h) <= _HEX_DIGITS:
        raise InvalidInput(f"invalid hex text: {text!r}")
    return "".join(format(int(ch, 16), "04b") for ch in h)


def binary_to_hex(bits: str) -> str:
    """
    BitSequence -> uppercase hex text.

    The sequence is left-padded with zeros to a whole number of nibbles and
    one digit is emitted per nibble. No leading digits are stripped, so
    binary_to_hex(hex_to_binary(h)) == h.upper() for any hex text h
    without a 0x prefix.
    """
    validate_bits(bits)
    pad = (-len(bits)) % 4
    padded = "0" * pad + bits
    return "".join(format(int(padded[i:i + 4], 2), "X") for i in range(0, len(padded), 4))


def bits_to_array(bits: str) -> np.ndarray:
    """BitSequence -> uint8 array of 0/1."""
    validate_bits(bits, allow_empty=True)
    return np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")


def array_to_bits(arr: np.ndarray) -> str:
    """uint8 array of 0/1 -> BitSequence."""
    a = np.asarray(arr, dtype=np.uint8).reshape(-1)
    if a.size and a.max() > 1:
        raise InvalidInput("array must contain only 0/1")
    return (a + ord("0")).tobytes().decode("ascii")
