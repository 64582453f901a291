"""
Hash Generator

Deterministic SHA-256 hash over a sequence of integers, used as the
Fiat-Shamir challenge function of the subgroup proof.

Each operand is encoded as the big-endian, minimal two's-complement byte
string of its integer value (a leading sign byte is included whenever the
high bit would otherwise be ambiguous). The encodings are concatenated in
call order without separators, hashed, and the digest is read back as a
non-negative integer. Existing proofs depend on this exact byte layout.
"""

from __future__ import annotations

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from hostkeys.exceptions import CryptoUnavailableError
from hostkeys.groups import Element, Exponent

Hashable = Union[Element, Exponent, int]


def to_signed_bytes(value: int) -> bytes:
    """Encode *value* as big-endian minimal two's-complement bytes.

    Zero encodes as a single zero byte and 255 as ``b"\\x00\\xff"``.
    """
    magnitude = value if value >= 0 else ~value
    return value.to_bytes(magnitude.bit_length() // 8 + 1, "big", signed=True)


def _integer(value: Hashable) -> int:
    if isinstance(value, (Element, Exponent)):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"Cannot hash a value of type {type(value).__name__}")


def generate_hash(*values: Hashable) -> int:
    """Hash the given values in order and return the digest as an integer.

    Args:
        *values: Elements, exponents or plain integers.

    Returns:
        The SHA-256 digest interpreted as a non-negative big-endian integer.

    Raises:
        CryptoUnavailableError: If SHA-256 is not provided by the backend.
    """
    try:
        digest = hashes.Hash(hashes.SHA256())
    except UnsupportedAlgorithm as exc:
        raise CryptoUnavailableError("SHA-256 is not available in this environment") from exc

    for value in values:
        digest.update(to_signed_bytes(_integer(value)))
    return int.from_bytes(digest.finalize(), "big")
