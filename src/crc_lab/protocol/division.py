# protocol/division.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from crc_lab.protocol.registry import check_polynomial
from crc_lab.utils.bitops import validate_bits


@dataclass(frozen=True)
class DivisionStep:
    """
    One register update of the long division.

    step:      1-based index of the consumed bit
    consumed:  input prefix consumed so far
    register:  width+1 bit register after the shift, before reduction
    operation: "xor" if the top bit was set and the generator was subtracted,
               otherwise "shift"
    """
    step: int
    consumed: str
    register: str
    operation: str


def _register_walk(bits: str, polynomial: int, width: int) -> Iterator[Tuple[int, bool]]:
    """
    Shared shift-register loop. For each input bit (MSB first) yields the
    register after the shift and whether the generator was XORed out:
      reg = (reg << 1) | bit
      if bit `width` of reg is set: reg ^= polynomial
    """
    top = 1 << width
    reg = 0
    for ch in bits:
        reg = (reg << 1) | (ch == "1")
        xor = bool(reg & top)
        yield reg, xor
        if xor:
            reg ^= polynomial


def divide(bits: str, polynomial: int, width: int) -> str:
    """
    Modulo-2 long division of `bits` by the generator, via a shift register.

    Returns the low `width` bits of the final register as a zero-padded
    string. Empty input yields an all-zero remainder.
    """
    check_polynomial(polynomial, width)
    validate_bits(bits, allow_empty=True)

    reg = 0
    for reg, xor in _register_walk(bits, polynomial, width):
        if xor:
            reg ^= polynomial

    return format(reg & ((1 << width) - 1), f"0{width}b")


def division_steps(bits: str, polynomial: int, width: int) -> List[DivisionStep]:
    """
    Same register walk as divide(), recorded one step per input bit.
    The reduced register after the last step equals divide(bits, ...).
    """
    check_polynomial(polynomial, width)
    validate_bits(bits, allow_empty=True)

    return [
        DivisionStep(
            step=i + 1,
            consumed=bits[:i + 1],
            register=format(reg, f"0{width + 1}b"),
            operation="xor" if xor else "shift",
        )
        for i, (reg, xor) in enumerate(_register_walk(bits, polynomial, width))
    ]
