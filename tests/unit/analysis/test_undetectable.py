# tests/unit/analysis/test_undetectable.py
from __future__ import annotations

import numpy as np
import pytest

from crc_lab.analysis.injection import apply_error_vector
from crc_lab.analysis.undetectable import VECTOR_PADDING, generate_undetectable_vector
from crc_lab.errors import InvalidConfig
from crc_lab.protocol.crc import encode, verify
from crc_lab.protocol.division import divide
from crc_lab.protocol.registry import PolynomialConfig, get_config

from tests.conftest import random_bits, registry_configs


def test_crc4_vector_is_generator_shifted():
    res = generate_undetectable_vector(get_config("CRC-4"))
    assert res.vector == "10011000"
    assert res.is_undetectable


def test_crc8_vector():
    assert generate_undetectable_vector(get_config("CRC-8")).vector == "100000111000"


@pytest.mark.parametrize("cfg", registry_configs(), ids=lambda c: c.name)
def test_vector_is_always_undetectable(cfg):
    res = generate_undetectable_vector(cfg)
    assert res.is_undetectable
    assert len(res.vector) == cfg.width + 1 + VECTOR_PADDING
    assert divide(res.vector, cfg.polynomial, cfg.width) == "0" * cfg.width


@pytest.mark.parametrize("cfg", registry_configs(), ids=lambda c: c.name)
def test_vector_applied_anywhere_goes_unnoticed(cfg):
    rng = np.random.default_rng(7 + cfg.width)
    vec = generate_undetectable_vector(cfg).vector
    cw = encode(random_bits(rng, 20), cfg).codeword
    for offset in range(len(cw) - len(vec) + 1):
        bad = apply_error_vector(cw, vec, offset=offset)
        assert bad != cw
        assert verify(bad, cfg).is_valid


def test_crc4_vector_applied_to_known_codeword():
    cfg = get_config("CRC-4")
    bad = apply_error_vector("10101101", generate_undetectable_vector(cfg).vector)
    assert bad == "00110101"
    assert verify(bad, cfg).is_valid


def test_custom_width_32_vector():
    cfg = PolynomialConfig.from_binary("CRC-32", "1" + format(0x04C11DB7, "032b"))
    assert generate_undetectable_vector(cfg).is_undetectable


def test_rejects_config_with_bad_width():
    # bypass __post_init__ to simulate a malformed entry
    cfg = object.__new__(PolynomialConfig)
    object.__setattr__(cfg, "polynomial", 0b10011)
    object.__setattr__(cfg, "width", 40)
    with pytest.raises(InvalidConfig):
        generate_undetectable_vector(cfg)
