"""
Public Key

Groups, bases and the subgroup proof of a host's public key. A public key
verifies its own subgroup proof when it is constructed, so every
``PublicKey`` instance in existence carries bases au, ai, av and ao that
are known to lie in the subgroup generated by ab.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hostkeys.exceptions import KeyValidationError, SubgroupProofError
from hostkeys.groups import Exponent, Element, GroupWithUnknownOrder
from hostkeys.keys.fields import PublicKeyFields
from hostkeys.keys.proof import SubgroupProof

logger = logging.getLogger(__name__)

_COMPOSITE_BASES = ("ab", "au", "ai", "av", "ao")
_SQUARE_ELEMENTS = ("g", "y", "z_plus_1")


def _require_residue(name: str, value: int, modulus: int) -> None:
    if not 0 <= value < modulus:
        raise KeyValidationError(f"The field {name} has to lie in [0, modulus)")


@dataclass(frozen=True)
class PublicKey:
    """A host's public key.

    Attributes:
        composite_group: Group for encryption and signing.
        e: Encryption and verification exponent.
        ab: Base for blinding.
        au: Base of the client's secret.
        ai: Base of the serial number.
        av: Base of the hashed identifier.
        ao: Base of the exposed arguments.
        proof: Proof that au, ai, av and ao are in the subgroup of ab.
        square_group: Group for verifiable encryption.
        g: Generator of the square group.
        y: Encryption element of the square group.
        z_plus_1: Encryption base of the square group.

    Raises:
        KeyValidationError: If an element is not in its group.
        SubgroupProofError: If the subgroup proof does not verify.
    """

    composite_group: GroupWithUnknownOrder
    e: Exponent
    ab: Element
    au: Element
    ai: Element
    av: Element
    ao: Element
    proof: SubgroupProof
    square_group: GroupWithUnknownOrder
    g: Element
    y: Element
    z_plus_1: Element

    def __post_init__(self) -> None:
        for name in _COMPOSITE_BASES:
            if not self.composite_group.contains(getattr(self, name)):
                raise KeyValidationError(f"The base {name} has to be in the composite group")
        for name in _SQUARE_ELEMENTS:
            if not self.square_group.contains(getattr(self, name)):
                raise KeyValidationError(f"The element {name} has to be in the square group")

        if not self.verify_subgroup_proof():
            logger.warning(
                "Rejected public key for a %d-bit composite modulus: subgroup proof does not verify",
                self.composite_group.modulus.bit_length(),
            )
            raise SubgroupProofError(
                "The elements au, ai, av and ao have to be in the subgroup of ab"
            )

    def verify_subgroup_proof(self) -> bool:
        """Return True if the stored proof holds for the stored bases."""
        return self.proof.verify(self.ab, self.au, self.ai, self.av, self.ao)

    # ------------------------------------------------------------------
    # Field records
    # ------------------------------------------------------------------

    def to_fields(self) -> PublicKeyFields:
        """Return the key's field values in their fixed order."""
        return PublicKeyFields(
            composite_modulus=self.composite_group.modulus,
            e=self.e.value,
            ab=self.ab.value,
            au=self.au.value,
            ai=self.ai.value,
            av=self.av.value,
            ao=self.ao.value,
            t=self.proof.t.value,
            su=self.proof.su.value,
            si=self.proof.si.value,
            sv=self.proof.sv.value,
            so=self.proof.so.value,
            square_modulus=self.square_group.modulus,
            g=self.g.value,
            y=self.y.value,
            z_plus_1=self.z_plus_1.value,
        )

    @classmethod
    def from_fields(cls, fields: PublicKeyFields) -> PublicKey:
        """Rebuild a public key from its field values, re-verifying the proof.

        Raises:
            KeyValidationError: If a base or square-group element lies
                outside ``[0, modulus)``.
            SubgroupProofError: If the proof does not verify.
        """
        composite = GroupWithUnknownOrder(fields.composite_modulus)
        square = GroupWithUnknownOrder(fields.square_modulus)
        for name in _COMPOSITE_BASES:
            _require_residue(name, getattr(fields, name), composite.modulus)
        for name in _SQUARE_ELEMENTS:
            _require_residue(name, getattr(fields, name), square.modulus)
        return cls(
            composite_group=composite,
            e=Exponent(fields.e),
            ab=composite.element(fields.ab),
            au=composite.element(fields.au),
            ai=composite.element(fields.ai),
            av=composite.element(fields.av),
            ao=composite.element(fields.ao),
            proof=SubgroupProof(
                t=Exponent(fields.t),
                su=Exponent(fields.su),
                si=Exponent(fields.si),
                sv=Exponent(fields.sv),
                so=Exponent(fields.so),
            ),
            square_group=square,
            g=square.element(fields.g),
            y=square.element(fields.y),
            z_plus_1=square.element(fields.z_plus_1),
        )
