"""
Key Pairs

Derives the public key that belongs to an existing private key. Prime and
group selection happen elsewhere; this module only combines given key
material and produces the subgroup proof.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import gmpy2

from hostkeys.exceptions import GroupMismatchError, KeyValidationError
from hostkeys.groups import Element, Exponent
from hostkeys.keys.private_key import PrivateKey
from hostkeys.keys.proof import SubgroupProof
from hostkeys.keys.public_key import PublicKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """A private key together with its public key."""

    private_key: PrivateKey
    public_key: PublicKey

    def __post_init__(self) -> None:
        if self.private_key.composite_group.modulus != self.public_key.composite_group.modulus:
            raise KeyValidationError("The keys of a pair share the composite modulus")
        if self.private_key.square_group.modulus != self.public_key.square_group.modulus:
            raise KeyValidationError("The keys of a pair share the square modulus")

    @classmethod
    def from_private_key(
        cls,
        private_key: PrivateKey,
        e: Union[Exponent, int],
        ab: Element,
        eu: Exponent,
        ei: Exponent,
        ev: Exponent,
        eo: Exponent,
        g: Element,
    ) -> KeyPair:
        """Build the public key for *private_key* and return both as a pair.

        Args:
            private_key: The private key.
            e: Encryption exponent; ``e * d`` must be 1 modulo the order of
                the composite group.
            ab: Base for blinding, in the private composite group.
            eu: Discrete logarithm of au with respect to ab.
            ei: Discrete logarithm of ai with respect to ab.
            ev: Discrete logarithm of av with respect to ab.
            eo: Discrete logarithm of ao with respect to ab.
            g: Generator of the private square group.

        Returns:
            The key pair, whose public key has already verified its proof.

        Raises:
            KeyValidationError: If e does not match d or the square modulus
                is not a perfect square.
            GroupMismatchError: If ab or g lie in the wrong group.
        """
        composite = private_key.composite_group
        square = private_key.square_group
        e = e if isinstance(e, Exponent) else Exponent(e)

        if (e.value * private_key.d.value - 1) % composite.order != 0:
            raise KeyValidationError("The exponent e has to be the inverse of d")
        if ab.group != composite:
            raise GroupMismatchError("The base ab has to belong to the composite group")
        if g.group != square:
            raise GroupMismatchError("The generator g has to belong to the square group")

        z, exact = gmpy2.iroot(square.modulus, 2)
        if not exact:
            raise KeyValidationError("The modulus of the square group has to be a square")

        proof = SubgroupProof.create(ab, eu, ei, ev, eo)

        public_composite = composite.drop_order()
        public_square = square.drop_order()
        public_key = PublicKey(
            composite_group=public_composite,
            e=e,
            ab=public_composite.element(ab.value),
            au=public_composite.element(ab.pow(eu).value),
            ai=public_composite.element(ab.pow(ei).value),
            av=public_composite.element(ab.pow(ev).value),
            ao=public_composite.element(ab.pow(eo).value),
            proof=proof,
            square_group=public_square,
            g=public_square.element(g.value),
            y=public_square.element(g.pow(private_key.x).value),
            z_plus_1=public_square.element(z + 1),
        )
        logger.info(
            "Derived public key for a %d-bit composite modulus",
            composite.modulus.bit_length(),
        )
        return cls(private_key=private_key, public_key=public_key)
