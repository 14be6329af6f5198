# solver.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from crc_lab.analysis.injection import ErrorAnalysis, analyze_errors
from crc_lab.errors import InvalidInput
from crc_lab.protocol.crc import VerifyResult, encode, verify
from crc_lab.protocol.registry import PolynomialConfig
from crc_lab.utils.bitops import binary_to_hex, hex_to_binary, validate_bits

logger = logging.getLogger(__name__)

FORMATS = ("hex", "binary")


@dataclass(frozen=True)
class EncodingReport:
    """Encoding exercise answer, every field in both bases."""
    config: PolynomialConfig
    data_bits: str
    data_hex: str
    crc_bits: str
    crc_hex: str
    codeword_bits: str
    codeword_hex: str

    @property
    def data_length(self) -> int:
        return len(self.data_bits)

    @property
    def codeword_length(self) -> int:
        return len(self.codeword_bits)


def parse_data(text: str, fmt: str = "hex") -> str:
    """User text -> BitSequence, read as hex or binary digits."""
    if fmt not in FORMATS:
        raise InvalidInput(f"fmt must be one of {FORMATS}, got {fmt!r}")
    if not isinstance(text, str):
        raise TypeError("text must be str")
    if fmt == "hex":
        return hex_to_binary(text)
    return validate_bits(text.strip())


def parse_positions(text: str) -> List[int]:
    """
    Comma-separated bit positions -> list of ints, e.g. "2, 3,4" -> [2, 3, 4].
    Blank entries are skipped; duplicates are kept (they cancel on injection).
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")
    out: List[int] = []
    for tok in text.split(","):
        tok = tok.strip()
        if not tok:
            continue
        try:
            p = int(tok, 10)
        except ValueError:
            raise InvalidInput(f"bit position is not an integer: {tok!r}") from None
        if p < 0:
            raise InvalidInput(f"bit position must be non-negative: {p}")
        out.append(p)
    if not out:
        raise InvalidInput("no bit positions given (e.g. 2,3,4)")
    return out


def solve_encoding(text: str, config: PolynomialConfig, fmt: str = "hex") -> EncodingReport:
    data = parse_data(text, fmt)
    res = encode(data, config)
    logger.debug("encode %s data=%s crc=%s", config.name, data, res.crc)
    return EncodingReport(
        config=config,
        data_bits=data,
        data_hex=binary_to_hex(data),
        crc_bits=res.crc,
        crc_hex=binary_to_hex(res.crc),
        codeword_bits=res.codeword,
        codeword_hex=binary_to_hex(res.codeword),
    )


def solve_error_detection(codeword: str, positions_text: str, config: PolynomialConfig) -> ErrorAnalysis:
    if not isinstance(codeword, str):
        raise TypeError("codeword must be str")
    positions = parse_positions(positions_text)
    res = analyze_errors(codeword.strip(), positions, config)
    logger.debug(
        "inject %s positions=%s remainder=%s detected=%s",
        config.name, positions, res.remainder, res.detected,
    )
    return res


def solve_remainder(hex_pattern: str, config: PolynomialConfig) -> VerifyResult:
    """Remainder of a hex error pattern (e.g. "134") under the generator."""
    bits = hex_to_binary(hex_pattern)
    res = verify(bits, config)
    logger.debug("remainder %s pattern=%s -> %s", config.name, hex_pattern, res.remainder)
    return res
