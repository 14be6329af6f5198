# protocol/registry.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from crc_lab.errors import InvalidConfig, InvalidInput
from crc_lab.utils.bitops import validate_bits

MAX_WIDTH = 32

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def check_width(width: int) -> int:
    if not isinstance(width, int) or isinstance(width, bool):
        raise TypeError("width must be int")
    if not (1 <= width <= MAX_WIDTH):
        raise InvalidConfig(f"width out of range [1,{MAX_WIDTH}]: {width}")
    return width


def check_polynomial(polynomial: int, width: int) -> int:
    """The generator must have exactly width+1 significant bits (top bit set)."""
    check_width(width)
    if not isinstance(polynomial, int) or isinstance(polynomial, bool):
        raise TypeError("polynomial must be int")
    if polynomial < 0 or polynomial >> width != 1:
        raise InvalidConfig(
            f"polynomial {polynomial:#x} does not have degree {width}"
        )
    return polynomial


def polynomial_formula(polynomial: int, width: int) -> str:
    """
    Display form of a generator, highest power first:
      0b10011 -> "z⁴ + z + 1"
    """
    check_polynomial(polynomial, width)
    terms = []
    for exp in range(width, -1, -1):
        if not (polynomial >> exp) & 1:
            continue
        if exp == 0:
            terms.append("1")
        elif exp == 1:
            terms.append("z")
        else:
            terms.append("z" + str(exp).translate(_SUPERSCRIPTS))
    return " + ".join(terms)


@dataclass(frozen=True)
class PolynomialConfig:
    """
    Named CRC generator.

    polynomial:  generator value with width+1 significant bits
    width:       CRC width in bits (1..32); also the degree of the generator
    binary_repr: polynomial as a '0'/'1' string of length width+1
    formula:     display string, e.g. "z⁴ + z + 1"
    """
    name: str
    polynomial: int
    width: int
    binary_repr: str
    formula: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidConfig("name must be a non-empty string")
        check_polynomial(self.polynomial, self.width)
        expected = format(self.polynomial, f"0{self.width + 1}b")
        if self.binary_repr != expected:
            raise InvalidConfig(
                f"{self.name}: binary_repr {self.binary_repr!r} does not match polynomial ({expected})"
            )

    @classmethod
    def from_binary(cls, name: str, bits: str, *, formula: str | None = None) -> "PolynomialConfig":
        """Build a custom config from the generator's bit string, e.g. "10011"."""
        try:
            validate_bits(bits)
        except InvalidInput as e:
            raise InvalidConfig(f"{name}: {e}") from e
        width = len(bits) - 1
        check_width(width)
        if bits[0] != "1":
            raise InvalidConfig(f"{name}: generator must start with 1")
        polynomial = int(bits, 2)
        if formula is None:
            formula = polynomial_formula(polynomial, width)
        return cls(name=name, polynomial=polynomial, width=width, binary_repr=bits, formula=formula)


def _entry(name: str, bits: str, formula: str) -> tuple[str, PolynomialConfig]:
    return name, PolynomialConfig.from_binary(name, bits, formula=formula)


REGISTRY: Mapping[str, PolynomialConfig] = MappingProxyType(dict([
    _entry("CRC-4", "10011", "z⁴ + z + 1"),
    _entry("CRC-5-ITU", "100101", "z⁵ + z² + 1"),
    _entry("CRC-7", "10001001", "z⁷ + z³ + 1"),
    _entry("CRC-8", "100000111", "z⁸ + z² + z + 1"),
]))


def available_configs(registry: Mapping[str, PolynomialConfig] = REGISTRY) -> list[str]:
    return sorted(registry)


def get_config(name: str, registry: Mapping[str, PolynomialConfig] = REGISTRY) -> PolynomialConfig:
    try:
        return registry[name]
    except KeyError:
        raise InvalidConfig(
            f"unknown polynomial {name!r}; available: {', '.join(available_configs(registry))}"
        ) from None
