"""
Group Arithmetic

Immutable groups, elements and exponents. All modular exponentiation,
inversion and gcd computations are delegated to gmpy2.
"""

from .exponent import Exponent
from .element import Element
from .group import Group, GroupWithKnownOrder, GroupWithUnknownOrder

__all__ = [
    "Exponent",
    "Element",
    "Group",
    "GroupWithKnownOrder",
    "GroupWithUnknownOrder",
]
