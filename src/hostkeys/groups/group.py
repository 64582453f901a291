"""
Multiplicative Groups

Groups modulo a positive integer. The private-key holder works in groups
whose order it knows; public-key holders only see the modulus.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

import gmpy2

from hostkeys.constants import RANDOM_EXPONENT_EXTRA_BITS
from hostkeys.exceptions import PreconditionError
from hostkeys.groups.element import Element
from hostkeys.groups.exponent import Exponent


@dataclass(frozen=True)
class Group:
    """A multiplicative group of integers modulo ``modulus``."""

    modulus: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "modulus", int(self.modulus))
        if self.modulus <= 0:
            raise PreconditionError("The modulus of a group has to be positive")

    def element(self, value: int) -> Element:
        """Return the element of this group with the given value (reduced)."""
        return Element(self, value)

    def contains(self, element: Element) -> bool:
        """Return True if *element* belongs to this group."""
        return isinstance(element, Element) and element.group == self

    def random_element(self) -> Element:
        """Return a uniformly random element coprime to the modulus."""
        bits = self.modulus.bit_length()
        while True:
            value = secrets.randbits(bits)
            if value < self.modulus and gmpy2.gcd(value, self.modulus) == 1:
                return Element(self, value)

    def random_exponent(self, bit_length: Optional[int] = None) -> Exponent:
        """Return a random non-negative exponent.

        Args:
            bit_length: Number of random bits. Defaults to a few bits more
                than the modulus so the result is statistically close to
                uniform modulo any subgroup order.
        """
        if bit_length is None:
            bit_length = self.modulus.bit_length() + RANDOM_EXPONENT_EXTRA_BITS
        return Exponent(secrets.randbits(bit_length))


@dataclass(frozen=True)
class GroupWithKnownOrder(Group):
    """A group whose order is known to its holder."""

    order: int

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "order", int(self.order))
        if not 0 < self.order < self.modulus:
            raise PreconditionError(
                "The order has to be positive and smaller than the modulus"
            )

    def exponent(self, value: int) -> Exponent:
        """Return *value* as an exponent reduced modulo the group order."""
        return Exponent(int(value) % self.order)

    def drop_order(self) -> GroupWithUnknownOrder:
        """Return the group with the same modulus but without its order."""
        return GroupWithUnknownOrder(self.modulus)


@dataclass(frozen=True)
class GroupWithUnknownOrder(Group):
    """A group of which only the modulus is known."""
