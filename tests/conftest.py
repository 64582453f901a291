"""Shared key material for the HostKeys test suite.

The primes are far too small for production use but large enough that an
accidental hash or commitment collision is out of the question.
"""

import pytest

from hostkeys.groups import Exponent, GroupWithKnownOrder
from hostkeys.keys import KeyPair, PrivateKey

# Composite group: n = P * Q
P = 2**61 - 1
Q = 2**89 - 1
N = P * Q
PHI_N = (P - 1) * (Q - 1)
E = 65537
D = pow(E, -1, PHI_N)

# Square group: modulus Z^2 with Z = ZP * ZQ
ZP = 2**31 - 1
ZQ = 2**19 - 1
Z = ZP * ZQ
SQUARE_ORDER = Z * (ZP - 1) * (ZQ - 1)
X = 123456789


@pytest.fixture(scope="session")
def composite_group() -> GroupWithKnownOrder:
    return GroupWithKnownOrder(N, PHI_N)


@pytest.fixture(scope="session")
def square_group() -> GroupWithKnownOrder:
    return GroupWithKnownOrder(Z * Z, SQUARE_ORDER)


@pytest.fixture(scope="session")
def private_key(composite_group, square_group) -> PrivateKey:
    return PrivateKey(
        composite_group=composite_group,
        p=P,
        q=Q,
        d=Exponent(D),
        square_group=square_group,
        x=Exponent(X),
    )


@pytest.fixture(scope="session")
def key_pair(private_key, composite_group, square_group) -> KeyPair:
    return KeyPair.from_private_key(
        private_key,
        e=E,
        ab=composite_group.element(5),
        eu=Exponent(1234567),
        ei=Exponent(7654321),
        ev=composite_group.random_exponent().mod(PHI_N),
        eo=composite_group.random_exponent().mod(PHI_N),
        g=square_group.element(7),
    )


@pytest.fixture(scope="session")
def public_key(key_pair):
    return key_pair.public_key
