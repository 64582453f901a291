"""
Verifiable Encryption

ElGamal-style encryption of an exponent in the square group of a public
key. For a message m and randomness r the ciphertext is

    w1 = y^r * (z + 1)^m,    w2 = g^r    (mod z^2)

which admits a separate proof of correct encryption. The holder of the
private exponent x (with y = g^x) recovers m modulo z, since
w1 / w2^x = (z + 1)^m = 1 + m*z (mod z^2).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import gmpy2

from hostkeys.exceptions import DecryptionError, GroupMismatchError
from hostkeys.groups import Element, Exponent

if TYPE_CHECKING:
    from hostkeys.keys.private_key import PrivateKey
    from hostkeys.keys.public_key import PublicKey


@dataclass(frozen=True)
class VerifiableEncryption:
    """A verifiable encryption ``(w1, w2)`` in a square group."""

    w1: Element
    w2: Element

    def __post_init__(self) -> None:
        if self.w1.group != self.w2.group:
            raise GroupMismatchError("Both parts of a verifiable encryption share one group")

    @classmethod
    def encrypt(cls, public_key: PublicKey, m: Exponent, r: Exponent) -> VerifiableEncryption:
        """Encrypt the exponent *m* with randomness *r* under *public_key*."""
        return cls(
            w1=public_key.y.pow(r).multiply(public_key.z_plus_1.pow(m)),
            w2=public_key.g.pow(r),
        )

    def decrypt(self, private_key: PrivateKey) -> Exponent:
        """Recover the encrypted exponent modulo z.

        Raises:
            GroupMismatchError: If the ciphertext is not in the key's square group.
            DecryptionError: If the ciphertext was not produced for this key.
        """
        square_modulus = private_key.square_group.modulus
        if self.w1.group.modulus != square_modulus:
            raise GroupMismatchError("The ciphertext is not in the square group of the key")

        z, exact = gmpy2.iroot(square_modulus, 2)
        if not exact:
            raise DecryptionError("The modulus of the square group is not a square")

        shared = gmpy2.powmod(self.w2.value, private_key.x.value, square_modulus)
        try:
            u = self.w1.value * gmpy2.invert(shared, square_modulus) % square_modulus
        except ZeroDivisionError as exc:
            raise DecryptionError("The ciphertext component w2 is not invertible") from exc

        if u % z != 1 % z:
            raise DecryptionError("The ciphertext was not encrypted for this key")
        return Exponent(int((u - 1) // z))
