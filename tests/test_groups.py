"""Tests for groups, elements and exponents."""

from dataclasses import FrozenInstanceError

import pytest

from hostkeys.exceptions import GroupMismatchError, PreconditionError
from hostkeys.groups import (
    Element,
    Exponent,
    GroupWithKnownOrder,
    GroupWithUnknownOrder,
)


class TestGroup:
    def test_modulus_must_be_positive(self):
        with pytest.raises(PreconditionError):
            GroupWithUnknownOrder(0)
        with pytest.raises(PreconditionError):
            GroupWithUnknownOrder(-7)

    @pytest.mark.parametrize("order", [0, 35, 40, -1])
    def test_order_must_lie_below_modulus(self, order):
        with pytest.raises(PreconditionError):
            GroupWithKnownOrder(35, order)

    def test_groups_compare_by_modulus_and_order(self):
        assert GroupWithKnownOrder(35, 24) == GroupWithKnownOrder(35, 24)
        assert GroupWithKnownOrder(35, 24) != GroupWithKnownOrder(35, 12)
        assert GroupWithUnknownOrder(35) == GroupWithUnknownOrder(35)
        assert GroupWithUnknownOrder(35) != GroupWithUnknownOrder(33)

    def test_known_and_unknown_order_groups_differ(self):
        assert GroupWithKnownOrder(35, 24) != GroupWithUnknownOrder(35)

    def test_drop_order(self):
        dropped = GroupWithKnownOrder(35, 24).drop_order()
        assert dropped == GroupWithUnknownOrder(35)
        assert isinstance(dropped, GroupWithUnknownOrder)

    def test_groups_are_hashable_and_frozen(self):
        group = GroupWithKnownOrder(35, 24)
        assert len({group, GroupWithKnownOrder(35, 24)}) == 1
        with pytest.raises(FrozenInstanceError):
            group.modulus = 33

    def test_contains(self):
        known = GroupWithKnownOrder(35, 24)
        assert known.contains(known.element(3))
        assert not known.contains(known.drop_order().element(3))
        assert not known.contains(3)

    def test_exponent_is_reduced_modulo_order(self):
        assert GroupWithKnownOrder(35, 24).exponent(50) == Exponent(2)
        assert GroupWithKnownOrder(35, 24).exponent(-1) == Exponent(23)

    def test_random_element_is_coprime(self, composite_group):
        for _ in range(20):
            element = composite_group.random_element()
            assert 0 <= element.value < composite_group.modulus
            assert element.is_relatively_prime()

    def test_random_exponent_bit_length(self, composite_group):
        limit = composite_group.modulus.bit_length() + 4
        for _ in range(20):
            assert 0 <= composite_group.random_exponent().value < 2**limit
        assert composite_group.random_exponent(8).value < 256


class TestElement:
    def test_value_is_reduced(self):
        group = GroupWithUnknownOrder(35)
        assert group.element(40).value == 5
        assert group.element(-1).value == 34
        assert group.element(35) == group.element(0)

    def test_operations(self):
        group = GroupWithUnknownOrder(35)
        a, b = group.element(4), group.element(33)
        assert a.add(b).value == 2
        assert a.subtract(b).value == 6
        assert a.multiply(b).value == (4 * 33) % 35
        assert a.pow(3).value == 64 % 35
        assert a.pow(Exponent(3)) == a.pow(3)

    def test_inverse(self):
        group = GroupWithUnknownOrder(35)
        a = group.element(4)
        assert a.multiply(a.inverse()).is_one()
        assert a.pow(-1) == a.inverse()
        assert a.pow(-2) == a.inverse().pow(2)

    def test_inverse_requires_coprime_element(self):
        group = GroupWithUnknownOrder(35)
        with pytest.raises(PreconditionError):
            group.element(7).inverse()
        with pytest.raises(PreconditionError):
            group.element(5).pow(-1)

    def test_operands_must_share_a_group(self):
        a = GroupWithUnknownOrder(35).element(4)
        b = GroupWithUnknownOrder(33).element(4)
        with pytest.raises(GroupMismatchError):
            a.multiply(b)
        with pytest.raises(GroupMismatchError):
            a.add(GroupWithKnownOrder(35, 24).element(4))

    def test_large_exponentiation_matches_builtin(self, composite_group):
        base = composite_group.element(123456789)
        exponent = 2**200 + 17
        assert base.pow(exponent).value == pow(123456789, exponent, composite_group.modulus)

    def test_int_conversion(self):
        assert int(GroupWithUnknownOrder(35).element(12)) == 12
        assert isinstance(GroupWithUnknownOrder(35).element(12), Element)


class TestExponent:
    def test_arithmetic(self):
        a, b = Exponent(7), Exponent(3)
        assert a.add(b) == Exponent(10)
        assert a.subtract(b) == Exponent(4)
        assert a.multiply(b) == Exponent(21)
        assert a.negate() == Exponent(-7)
        assert b.subtract(a).mod(5) == Exponent(1)

    def test_ordering(self):
        assert Exponent(2) < Exponent(3)
        assert sorted([Exponent(3), Exponent(-1)]) == [Exponent(-1), Exponent(3)]
