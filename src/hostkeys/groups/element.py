"""Group elements backed by GMP arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import gmpy2

from hostkeys.exceptions import GroupMismatchError, PreconditionError
from hostkeys.groups.exponent import Exponent

if TYPE_CHECKING:
    from hostkeys.groups.group import Group


@dataclass(frozen=True)
class Element:
    """A value of a multiplicative group modulo ``group.modulus``.

    The value is reduced into ``[0, modulus)`` on construction, so two
    elements are equal exactly when they share a group and a residue.
    Binary operations require both operands to belong to the same group.
    """

    group: Group
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) % self.group.modulus)

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def is_relatively_prime(self) -> bool:
        """Return True if the value is coprime to the group modulus."""
        return gmpy2.gcd(self.value, self.group.modulus) == 1

    def is_one(self) -> bool:
        return self.value == 1

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, other: Element) -> Element:
        self._require_same_group(other)
        return Element(self.group, self.value + other.value)

    def subtract(self, other: Element) -> Element:
        self._require_same_group(other)
        return Element(self.group, self.value - other.value)

    def multiply(self, other: Element) -> Element:
        self._require_same_group(other)
        return Element(self.group, gmpy2.mul(self.value, other.value))

    def inverse(self) -> Element:
        """Return the multiplicative inverse of this element.

        Raises:
            PreconditionError: If the element is not relatively prime to the
                group modulus.
        """
        if not self.is_relatively_prime():
            raise PreconditionError(
                "The element has to be relatively prime to the group modulus"
            )
        return Element(self.group, gmpy2.invert(self.value, self.group.modulus))

    def pow(self, exponent: Union[Exponent, int]) -> Element:
        """Raise this element to the given exponent.

        Negative exponents are allowed for invertible elements.

        Raises:
            PreconditionError: If the exponent is negative and the element
                has no inverse.
        """
        e = exponent.value if isinstance(exponent, Exponent) else int(exponent)
        if e < 0 and not self.is_relatively_prime():
            raise PreconditionError(
                "Only elements relatively prime to the modulus have negative powers"
            )
        return Element(self.group, gmpy2.powmod(self.value, e, self.group.modulus))

    def _require_same_group(self, other: Element) -> None:
        if other.group != self.group:
            raise GroupMismatchError(
                f"Cannot combine an element of {other.group} with one of {self.group}"
            )

    def __int__(self) -> int:
        return self.value
