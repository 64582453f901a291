"""
Subgroup Membership Proof

Non-interactive proof that the bases au, ai, av and ao lie in the subgroup
generated by ab. The prover knows the discrete logarithms eu, ei, ev, eo
with ``a* = ab^e*``. It commits to ``ab^r*`` for random r*, derives the
challenge ``t`` by hashing the four commitments (Fiat-Shamir), and answers
with ``s* = r* - t * e*``. The verifier recomputes each commitment as
``ab^s* * a*^t`` and accepts iff hashing them reproduces ``t``.
"""

from __future__ import annotations

from dataclasses import dataclass

from hostkeys.crypto.hashing import generate_hash
from hostkeys.exceptions import GroupMismatchError, PreconditionError
from hostkeys.groups import Element, Exponent, GroupWithKnownOrder


@dataclass(frozen=True)
class SubgroupProof:
    """Challenge and responses of a subgroup membership proof.

    Attributes:
        t: Hash of the prover's commitments.
        su: Response proving that au is in the subgroup of ab.
        si: Response proving that ai is in the subgroup of ab.
        sv: Response proving that av is in the subgroup of ab.
        so: Response proving that ao is in the subgroup of ab.
    """

    t: Exponent
    su: Exponent
    si: Exponent
    sv: Exponent
    so: Exponent

    def commitments(
        self, ab: Element, au: Element, ai: Element, av: Element, ao: Element
    ) -> tuple[Element, Element, Element, Element]:
        """Recompute the prover's commitments from the public bases."""
        return (
            ab.pow(self.su).multiply(au.pow(self.t)),
            ab.pow(self.si).multiply(ai.pow(self.t)),
            ab.pow(self.sv).multiply(av.pow(self.t)),
            ab.pow(self.so).multiply(ao.pow(self.t)),
        )

    def verify(self, ab: Element, au: Element, ai: Element, av: Element, ao: Element) -> bool:
        """Return True if the proof holds for the given bases."""
        try:
            commitments = self.commitments(ab, au, ai, av, ao)
        except PreconditionError:
            # negative response on a base without an inverse
            return False
        return self.t.value == generate_hash(*commitments)

    @classmethod
    def create(
        cls,
        ab: Element,
        eu: Exponent,
        ei: Exponent,
        ev: Exponent,
        eo: Exponent,
    ) -> SubgroupProof:
        """Prove that ``ab^eu``, ``ab^ei``, ``ab^ev`` and ``ab^eo`` lie in <ab>.

        Args:
            ab: The generating base, in a group whose order the prover knows.
            eu: Discrete logarithm of au with respect to ab.
            ei: Discrete logarithm of ai with respect to ab.
            ev: Discrete logarithm of av with respect to ab.
            eo: Discrete logarithm of ao with respect to ab.

        Returns:
            A proof whose responses are reduced modulo the group order.

        Raises:
            GroupMismatchError: If ab's group does not have a known order.
        """
        group = ab.group
        if not isinstance(group, GroupWithKnownOrder):
            raise GroupMismatchError("The prover needs a group with known order")

        logarithms = (eu, ei, ev, eo)
        randomness = [group.random_exponent().mod(group.order) for _ in logarithms]
        t = Exponent(generate_hash(*(ab.pow(r) for r in randomness)))
        su, si, sv, so = (
            r.subtract(t.multiply(e)).mod(group.order) for r, e in zip(randomness, logarithms)
        )
        return cls(t=t, su=su, si=si, sv=sv, so=so)
