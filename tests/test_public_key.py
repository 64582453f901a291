"""Tests for PublicKey, the subgroup proof and KeyPair."""

import logging
from dataclasses import FrozenInstanceError, replace

import pytest

from hostkeys.exceptions import (
    GroupMismatchError,
    KeyValidationError,
    SubgroupProofError,
)
from hostkeys.groups import Exponent, GroupWithKnownOrder, GroupWithUnknownOrder
from hostkeys.keys import KeyPair, PrivateKey, PublicKey, SubgroupProof

from conftest import E, N, P, PHI_N, Z


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SMALL_P = 2**31 - 1
SMALL_Q = 2**61 - 1


def _shifted(exponent: Exponent) -> Exponent:
    return exponent.add(Exponent(1))


@pytest.fixture(scope="module")
def other_key_pair() -> KeyPair:
    phi = (SMALL_P - 1) * (SMALL_Q - 1)
    composite = GroupWithKnownOrder(SMALL_P * SMALL_Q, phi)
    square = GroupWithKnownOrder(1009**2, 1009 * 1008)
    private_key = PrivateKey(
        composite_group=composite,
        p=SMALL_P,
        q=SMALL_Q,
        d=Exponent(pow(E, -1, phi)),
        square_group=square,
        x=Exponent(77),
    )
    return KeyPair.from_private_key(
        private_key,
        e=E,
        ab=composite.element(3),
        eu=Exponent(11),
        ei=Exponent(12),
        ev=Exponent(13),
        eo=Exponent(14),
        g=square.element(2),
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestSubgroupProof:
    def test_generated_key_verifies(self, public_key):
        assert public_key.verify_subgroup_proof() is True

    def test_responses_are_reduced(self, public_key):
        proof = public_key.proof
        for response in (proof.su, proof.si, proof.sv, proof.so):
            assert 0 <= response.value < PHI_N
        assert 0 <= proof.t.value < 2**256

    def test_unreduced_responses_still_verify(self, public_key):
        proof = replace(public_key.proof, su=public_key.proof.su.subtract(Exponent(PHI_N)))
        assert proof.verify(public_key.ab, public_key.au, public_key.ai, public_key.av, public_key.ao)

    def test_negative_response_on_non_invertible_base_fails(self, public_key):
        group = public_key.composite_group
        proof = replace(public_key.proof, su=Exponent(-1))
        base = group.element(P)
        assert proof.verify(base, public_key.au, public_key.ai, public_key.av, public_key.ao) is False

    def test_create_needs_known_order(self, public_key):
        with pytest.raises(GroupMismatchError):
            SubgroupProof.create(
                public_key.ab, Exponent(1), Exponent(2), Exponent(3), Exponent(4)
            )

    def test_proofs_are_randomized(self, composite_group):
        ab = composite_group.element(5)
        logarithms = (Exponent(1), Exponent(2), Exponent(3), Exponent(4))
        assert SubgroupProof.create(ab, *logarithms) != SubgroupProof.create(ab, *logarithms)

    def test_base_outside_subgroup_is_not_provable(self, composite_group):
        ab = composite_group.element(5)
        proof = SubgroupProof.create(ab, Exponent(1), Exponent(1), Exponent(1), Exponent(1))
        assert proof.verify(ab, ab, ab, ab, ab)
        other = composite_group.element(7)
        assert not proof.verify(ab, other, ab, ab, ab)


class TestPublicKeyValidation:
    @pytest.mark.parametrize("name", ["t", "su", "si", "sv", "so"])
    def test_tampered_proof_is_rejected(self, public_key, name):
        proof = replace(public_key.proof, **{name: _shifted(getattr(public_key.proof, name))})
        with pytest.raises(SubgroupProofError):
            replace(public_key, proof=proof)

    @pytest.mark.parametrize("name", ["ab", "au", "ai", "av", "ao"])
    def test_base_off_by_one_is_rejected(self, public_key, name):
        base = getattr(public_key, name)
        with pytest.raises(SubgroupProofError):
            replace(public_key, **{name: base.add(base.group.element(1))})

    @pytest.mark.parametrize("name", ["ab", "au", "ai", "av", "ao"])
    def test_squared_base_is_rejected(self, public_key, name):
        base = getattr(public_key, name)
        with pytest.raises(SubgroupProofError):
            replace(public_key, **{name: base.multiply(base)})

    def test_rejection_is_logged(self, public_key, caplog):
        proof = replace(public_key.proof, t=_shifted(public_key.proof.t))
        with caplog.at_level(logging.WARNING, logger="hostkeys.keys.public_key"):
            with pytest.raises(SubgroupProofError):
                replace(public_key, proof=proof)
        assert "subgroup proof does not verify" in caplog.text

    def test_proof_error_is_a_key_validation_error(self, public_key):
        proof = replace(public_key.proof, so=_shifted(public_key.proof.so))
        with pytest.raises(KeyValidationError):
            replace(public_key, proof=proof)

    def test_base_must_be_in_composite_group(self, public_key):
        with pytest.raises(KeyValidationError):
            replace(public_key, ab=public_key.square_group.element(5))

    def test_square_element_must_be_in_square_group(self, public_key):
        with pytest.raises(KeyValidationError):
            replace(public_key, y=public_key.composite_group.element(5))

    def test_is_frozen(self, public_key):
        with pytest.raises(FrozenInstanceError):
            public_key.e = Exponent(3)


class TestPublicKeyShape:
    def test_groups_hide_their_order(self, public_key):
        assert isinstance(public_key.composite_group, GroupWithUnknownOrder)
        assert isinstance(public_key.square_group, GroupWithUnknownOrder)
        assert public_key.composite_group.modulus == N
        assert public_key.square_group.modulus == Z * Z

    def test_bases_are_powers_of_ab(self, public_key):
        assert public_key.au == public_key.ab.pow(1234567)
        assert public_key.ai == public_key.ab.pow(7654321)

    def test_square_elements(self, key_pair):
        public_key = key_pair.public_key
        assert public_key.z_plus_1.value == Z + 1
        assert public_key.y == public_key.g.pow(key_pair.private_key.x)

    def test_field_order(self, public_key):
        assert list(public_key.to_fields().model_dump()) == [
            "composite_modulus",
            "e",
            "ab",
            "au",
            "ai",
            "av",
            "ao",
            "t",
            "su",
            "si",
            "sv",
            "so",
            "square_modulus",
            "g",
            "y",
            "z_plus_1",
        ]

    def test_rebuild(self, public_key):
        rebuilt = PublicKey.from_fields(public_key.to_fields())
        assert rebuilt == public_key
        assert hash(rebuilt) == hash(public_key)

    @pytest.mark.parametrize("name", ["t", "sv", "so"])
    def test_rebuild_reverifies_proof(self, public_key, name):
        fields = public_key.to_fields()
        tampered = fields.model_copy(update={name: getattr(fields, name) + 1})
        with pytest.raises(SubgroupProofError):
            PublicKey.from_fields(tampered)

    @pytest.mark.parametrize("name", ["ab", "au", "ai", "av", "ao"])
    def test_rebuild_reverifies_bases(self, public_key, name):
        fields = public_key.to_fields()
        value = (getattr(fields, name) + 1) % fields.composite_modulus
        with pytest.raises(SubgroupProofError):
            PublicKey.from_fields(fields.model_copy(update={name: value}))

    def test_rebuild_round_trips_fields(self, public_key):
        fields = public_key.to_fields()
        assert PublicKey.from_fields(fields).to_fields() == fields

    @pytest.mark.parametrize("name", ["ab", "au", "ai", "av", "ao"])
    def test_rebuild_rejects_unreduced_base(self, public_key, name):
        fields = public_key.to_fields()
        shifted = fields.model_copy(update={name: getattr(fields, name) + fields.composite_modulus})
        with pytest.raises(KeyValidationError) as excinfo:
            PublicKey.from_fields(shifted)
        assert excinfo.type is KeyValidationError

    @pytest.mark.parametrize("name", ["g", "y", "z_plus_1"])
    def test_rebuild_rejects_unreduced_square_element(self, public_key, name):
        fields = public_key.to_fields()
        shifted = fields.model_copy(update={name: getattr(fields, name) + fields.square_modulus})
        with pytest.raises(KeyValidationError) as excinfo:
            PublicKey.from_fields(shifted)
        assert excinfo.type is KeyValidationError


class TestKeyPair:
    def test_public_key_matches_private_key(self, key_pair):
        assert key_pair.public_key.composite_group == key_pair.private_key.composite_group.drop_order()
        assert key_pair.public_key.e == Exponent(E)

    def test_public_exponent_inverts_private_exponent(self, key_pair):
        message = 271828182845904523536
        signature = key_pair.private_key.pow_d(message)
        assert pow(signature.value, key_pair.public_key.e.value, N) == message

    def test_wrong_public_exponent(self, private_key, composite_group, square_group):
        with pytest.raises(KeyValidationError):
            KeyPair.from_private_key(
                private_key,
                e=E + 2,
                ab=composite_group.element(5),
                eu=Exponent(1),
                ei=Exponent(2),
                ev=Exponent(3),
                eo=Exponent(4),
                g=square_group.element(7),
            )

    def test_base_from_wrong_group(self, private_key, composite_group, square_group):
        with pytest.raises(GroupMismatchError):
            KeyPair.from_private_key(
                private_key,
                e=E,
                ab=composite_group.drop_order().element(5),
                eu=Exponent(1),
                ei=Exponent(2),
                ev=Exponent(3),
                eo=Exponent(4),
                g=square_group.element(7),
            )

    def test_generator_from_wrong_group(self, private_key, composite_group):
        with pytest.raises(GroupMismatchError):
            KeyPair.from_private_key(
                private_key,
                e=E,
                ab=composite_group.element(5),
                eu=Exponent(1),
                ei=Exponent(2),
                ev=Exponent(3),
                eo=Exponent(4),
                g=composite_group.element(7),
            )

    def test_square_modulus_must_be_square(self, private_key, composite_group):
        square = GroupWithKnownOrder(1000003, 1000002)
        non_square_key = replace(private_key, square_group=square)
        with pytest.raises(KeyValidationError):
            KeyPair.from_private_key(
                non_square_key,
                e=E,
                ab=composite_group.element(5),
                eu=Exponent(1),
                ei=Exponent(2),
                ev=Exponent(3),
                eo=Exponent(4),
                g=square.element(2),
            )

    def test_mismatched_pair_is_rejected(self, key_pair, other_key_pair):
        with pytest.raises(KeyValidationError):
            KeyPair(key_pair.private_key, other_key_pair.public_key)

    def test_derivation_is_logged(self, private_key, composite_group, square_group, caplog):
        with caplog.at_level(logging.INFO, logger="hostkeys.keys.key_pair"):
            KeyPair.from_private_key(
                private_key,
                e=E,
                ab=composite_group.element(5),
                eu=Exponent(1),
                ei=Exponent(2),
                ev=Exponent(3),
                eo=Exponent(4),
                g=square_group.element(7),
            )
        assert "Derived public key" in caplog.text
