"""
Private Key

Groups and exponents of a host's private key, with decryption and signing
exponentiation accelerated by the Chinese Remainder Theorem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

import gmpy2

from hostkeys.exceptions import GroupMismatchError, KeyValidationError
from hostkeys.groups import Element, Exponent, GroupWithKnownOrder
from hostkeys.keys.fields import PrivateKeyFields

logger = logging.getLogger(__name__)


def _reduced_exponent(d: int, prime: int) -> int:
    """Reduce *d* modulo ``prime - 1`` for exponentiation modulo *prime*.

    A positive multiple of ``prime - 1`` reduces to ``prime - 1`` rather than
    0, so that multiples of *prime* still map to 0 instead of 1.
    """
    reduced = d % (prime - 1)
    if reduced == 0 and d > 0:
        return prime - 1
    return reduced


@dataclass(frozen=True)
class PrivateKey:
    """A host's private key.

    ``pow_d`` computes ``c^d mod n`` as two half-width exponentiations
    modulo p and q, recombined with precomputed CRT coefficients, which is
    roughly four times faster than a single exponentiation modulo n.

    Equality, hashing and ``repr`` cover all key fields and are meant for
    diagnostics and tests. They are not constant-time; never use them to
    compare secret key material where timing may leak.

    Attributes:
        composite_group: Group modulo n = p * q, used for signing.
        p: First prime factor of the composite modulus.
        q: Second prime factor of the composite modulus.
        d: Decryption (signing) exponent.
        square_group: Group used for verifiable encryption.
        x: Decryption exponent of the square group.

    Raises:
        KeyValidationError: If the composite modulus is not p * q.
    """

    composite_group: GroupWithKnownOrder
    p: int
    q: int
    d: Exponent
    square_group: GroupWithKnownOrder
    x: Exponent

    _d_mod_p_minus_1: int = field(init=False, repr=False, compare=False)
    _d_mod_q_minus_1: int = field(init=False, repr=False, compare=False)
    _p_identity_crt: int = field(init=False, repr=False, compare=False)
    _q_identity_crt: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.composite_group, GroupWithKnownOrder):
            raise KeyValidationError("The composite group of a private key needs a known order")
        if not isinstance(self.square_group, GroupWithKnownOrder):
            raise KeyValidationError("The square group of a private key needs a known order")

        p, q = int(self.p), int(self.q)
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "q", q)
        if p < 2 or q < 2:
            raise KeyValidationError("The prime factors p and q have to be at least 2")
        n = self.composite_group.modulus
        if n != p * q:
            raise KeyValidationError(
                "The modulus of the composite group has to be the product of p and q"
            )

        try:
            p_identity = gmpy2.invert(q, p) * q % n
            q_identity = gmpy2.invert(p, q) * p % n
        except ZeroDivisionError as exc:
            raise KeyValidationError("The prime factors p and q have to be coprime") from exc

        object.__setattr__(self, "_d_mod_p_minus_1", _reduced_exponent(self.d.value, p))
        object.__setattr__(self, "_d_mod_q_minus_1", _reduced_exponent(self.d.value, q))
        object.__setattr__(self, "_p_identity_crt", int(p_identity))
        object.__setattr__(self, "_q_identity_crt", int(q_identity))
        logger.debug("Loaded private key for a %d-bit composite modulus", n.bit_length())

    def pow_d(self, c: Union[int, Element]) -> Element:
        """Return ``c^d`` in the composite group, computed via the CRT.

        Args:
            c: An integer, or an element of the composite group.

        Returns:
            The composite-group element ``c^d mod n``.

        Raises:
            GroupMismatchError: If ``c`` is an element of another group.
        """
        if isinstance(c, Element):
            if c.group != self.composite_group:
                raise GroupMismatchError("The element has to belong to the composite group")
            c = c.value

        m_mod_p = gmpy2.powmod(c, self._d_mod_p_minus_1, self.p)
        m_mod_q = gmpy2.powmod(c, self._d_mod_q_minus_1, self.q)
        return self.composite_group.element(
            m_mod_p * self._p_identity_crt + m_mod_q * self._q_identity_crt
        )

    # ------------------------------------------------------------------
    # Field records
    # ------------------------------------------------------------------

    def to_fields(self) -> PrivateKeyFields:
        """Return the key's field values in their fixed order."""
        return PrivateKeyFields(
            composite_modulus=self.composite_group.modulus,
            composite_order=self.composite_group.order,
            p=self.p,
            q=self.q,
            d=self.d.value,
            square_modulus=self.square_group.modulus,
            square_order=self.square_group.order,
            x=self.x.value,
        )

    @classmethod
    def from_fields(cls, fields: PrivateKeyFields) -> PrivateKey:
        """Rebuild a private key from its field values.

        Raises:
            KeyValidationError: If the values violate a key invariant.
            PreconditionError: If a group order is out of range.
        """
        return cls(
            composite_group=GroupWithKnownOrder(fields.composite_modulus, fields.composite_order),
            p=fields.p,
            q=fields.q,
            d=Exponent(fields.d),
            square_group=GroupWithKnownOrder(fields.square_modulus, fields.square_order),
            x=Exponent(fields.x),
        )
