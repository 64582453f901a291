"""Arbitrary-precision exponents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Exponent:
    """An integer used as an exponent in group operations.

    Exponents are not tied to a group. They may be negative and are only
    reduced when a caller asks for it, e.g. modulo a known group order.
    """

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value))

    def add(self, other: Exponent) -> Exponent:
        return Exponent(self.value + other.value)

    def subtract(self, other: Exponent) -> Exponent:
        return Exponent(self.value - other.value)

    def multiply(self, other: Exponent) -> Exponent:
        return Exponent(self.value * other.value)

    def negate(self) -> Exponent:
        return Exponent(-self.value)

    def mod(self, modulus: int) -> Exponent:
        """Return this exponent reduced into ``[0, modulus)``."""
        return Exponent(self.value % modulus)

    def __int__(self) -> int:
        return self.value
