# tests/conftest.py
from __future__ import annotations

import numpy as np

from crc_lab.protocol.registry import REGISTRY, PolynomialConfig


def registry_configs() -> list[PolynomialConfig]:
    """Registry entries in a stable order, for parametrize()."""
    return [REGISTRY[name] for name in sorted(REGISTRY)]


def random_bits(rng: np.random.Generator, n: int) -> str:
    """n random bits as a BitSequence."""
    return "".join("1" if b else "0" for b in rng.integers(0, 2, size=n, dtype=np.uint8))
