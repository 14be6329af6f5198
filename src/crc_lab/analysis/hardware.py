# analysis/hardware.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from crc_lab.protocol.registry import PolynomialConfig, check_polynomial


@dataclass(frozen=True)
class RegisterLayout:
    """
    Shift-register (LFSR) realisation of a generator.

    flip_flops: one D flip-flop per CRC bit (= width)
    xor_gates:  one gate per non-zero coefficient, minus the leading term
    taps:       exponents below `width` with a 1 coefficient; feedback is
                XORed in ahead of these stages
    """
    flip_flops: int
    xor_gates: int
    taps: Tuple[int, ...]


def register_layout(config: PolynomialConfig) -> RegisterLayout:
    check_polynomial(config.polynomial, config.width)
    taps = tuple(e for e in range(config.width) if (config.polynomial >> e) & 1)
    return RegisterLayout(
        flip_flops=config.width,
        xor_gates=bin(config.polynomial).count("1") - 1,
        taps=taps,
    )
