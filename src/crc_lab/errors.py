# errors.py
from __future__ import annotations


class CRCError(ValueError):
    """Base class for every validation failure raised by crc_lab."""


class InvalidInput(CRCError):
    """
    Malformed bit/hex text, empty data, or a codeword too short to hold
    its CRC field. Caller must supply corrected input.
    """


class InvalidConfig(CRCError):
    """
    Width outside the supported range, or a polynomial entry whose
    value, width and binary form disagree.
    """
