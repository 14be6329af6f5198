# analysis/undetectable.py
from __future__ import annotations

from dataclasses import dataclass

from crc_lab.protocol.division import divide
from crc_lab.protocol.registry import PolynomialConfig, check_polynomial

# Trailing zeros appended to the generator. Fixed, so the vector length does
# not depend on any data it is later combined with.
VECTOR_PADDING = 3


@dataclass(frozen=True)
class UndetectableVector:
    vector: str
    is_undetectable: bool


def generate_undetectable_vector(config: PolynomialConfig) -> UndetectableVector:
    """
    Build an error pattern the CRC cannot see: the generator itself shifted
    left by VECTOR_PADDING bits, i.e. g(z) * z^3.

    Being a multiple of g(z), it divides to a zero remainder, and adding it
    modulo 2 to any codeword leaves that codeword's remainder unchanged.
    The division below is a runtime proof of that property; it always
    reports True for a well-formed config.
    """
    check_polynomial(config.polynomial, config.width)
    vector = format(config.polynomial, f"0{config.width + 1}b") + "0" * VECTOR_PADDING
    remainder = divide(vector, config.polynomial, config.width)
    return UndetectableVector(vector=vector, is_undetectable=remainder == "0" * config.width)
