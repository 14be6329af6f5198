# protocol/crc.py
from __future__ import annotations

from dataclasses import dataclass

from crc_lab.errors import InvalidInput
from crc_lab.protocol.division import divide
from crc_lab.protocol.registry import PolynomialConfig
from crc_lab.utils.bitops import validate_bits


@dataclass(frozen=True)
class EncodeResult:
    crc: str
    codeword: str


@dataclass(frozen=True)
class VerifyResult:
    """
    remainder: divide(codeword) under the generator
    is_valid:  remainder is all zeros

    is_valid certifies that no *detectable* error occurred. An error pattern
    that is a multiple of the generator leaves the remainder at zero, so a
    valid result does not prove the codeword was received unchanged.
    """
    remainder: str
    is_valid: bool


def encode(data: str, config: PolynomialConfig) -> EncodeResult:
    """
    Append the CRC of `data` under `config`.

      crc      = divide(data + width zeros)
      codeword = data + crc

    divide(codeword) is all zeros for every unmodified codeword.
    """
    validate_bits(data)
    crc = divide(data + "0" * config.width, config.polynomial, config.width)
    return EncodeResult(crc=crc, codeword=data + crc)


def verify(codeword: str, config: PolynomialConfig) -> VerifyResult:
    """
    Divide a received codeword by the generator.

    A codeword of exactly `width` bits is accepted as an empty data field
    followed by the CRC field; shorter input is rejected.
    """
    validate_bits(codeword, allow_empty=True)
    if len(codeword) < config.width:
        raise InvalidInput(
            f"verify: codeword has {len(codeword)} bits, needs at least width={config.width}"
        )
    remainder = divide(codeword, config.polynomial, config.width)
    return VerifyResult(remainder=remainder, is_valid=remainder == "0" * config.width)
