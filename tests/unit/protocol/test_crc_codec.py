# tests/unit/protocol/test_crc_codec.py
from __future__ import annotations

import numpy as np
import pytest

from crc_lab.errors import InvalidInput
from crc_lab.protocol.crc import encode, verify
from crc_lab.protocol.division import divide
from crc_lab.protocol.registry import PolynomialConfig, get_config

from tests.conftest import random_bits, registry_configs


def test_encode_crc4_known_vector():
    res = encode("1010", get_config("CRC-4"))
    assert res.crc == "1101"
    assert res.codeword == "10101101"


def test_encode_crc8_b1d_regression():
    res = encode("101100011101", get_config("CRC-8"))
    assert res.crc == "11000100"
    assert res.codeword == "10110001110111000100"


def test_encode_width_one_is_even_parity():
    parity = PolynomialConfig.from_binary("parity", "11")
    assert encode("1011", parity).crc == "1"
    assert encode("1001", parity).crc == "0"


@pytest.mark.parametrize("cfg", registry_configs(), ids=lambda c: c.name)
@pytest.mark.parametrize("n", [1, 2, 7, 8, 13, 64, 257])
def test_roundtrip_verifies_for_every_registry_config(cfg, n):
    rng = np.random.default_rng(1000 + n * 10 + cfg.width)
    data = random_bits(rng, n)
    res = encode(data, cfg)
    assert len(res.codeword) == n + cfg.width
    assert res.codeword.startswith(data)
    assert divide(res.codeword, cfg.polynomial, cfg.width) == "0" * cfg.width

    out = verify(res.codeword, cfg)
    assert out.is_valid
    assert out.remainder == "0" * cfg.width


def test_roundtrip_custom_width_32():
    cfg = PolynomialConfig.from_binary("CRC-32", "1" + format(0x04C11DB7, "032b"))
    rng = np.random.default_rng(32)
    for n in (1, 31, 100):
        data = random_bits(rng, n)
        assert verify(encode(data, cfg).codeword, cfg).is_valid


def test_encode_rejects_empty_or_non_binary():
    cfg = get_config("CRC-4")
    with pytest.raises(InvalidInput):
        encode("", cfg)
    with pytest.raises(InvalidInput):
        encode("10a1", cfg)


def test_verify_reports_remainder_for_corrupted_word():
    res = verify("10111101", get_config("CRC-4"))
    assert not res.is_valid
    assert res.remainder != "0000"


def test_verify_codeword_of_exactly_width_bits_is_accepted():
    # treated as empty data + CRC field
    cfg = get_config("CRC-4")
    assert verify("0000", cfg).is_valid
    res = verify("0101", cfg)
    assert not res.is_valid
    assert res.remainder == "0101"


def test_verify_rejects_codeword_shorter_than_width():
    with pytest.raises(InvalidInput, match="at least width"):
        verify("101", get_config("CRC-4"))
    with pytest.raises(InvalidInput):
        verify("", get_config("CRC-4"))


def test_verify_rejects_non_binary():
    with pytest.raises(InvalidInput):
        verify("1010x101", get_config("CRC-4"))


def test_valid_does_not_mean_unchanged():
    # z^15 + 1 is a multiple of z^4 + z + 1, so flipping the two end bits of a
    # 16-bit codeword goes unnoticed.
    cfg = get_config("CRC-4")
    cw = encode("101100011101", cfg).codeword
    assert len(cw) == 16
    bad = ("0" if cw[0] == "1" else "1") + cw[1:15] + ("0" if cw[15] == "1" else "1")
    assert bad != cw
    assert verify(bad, cfg).is_valid
