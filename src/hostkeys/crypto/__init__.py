"""Hashing and symmetric-cipher helpers shared by the key model."""

from .hashing import generate_hash, to_signed_bytes
from .iv import InitializationVector

__all__ = [
    "generate_hash",
    "to_signed_bytes",
    "InitializationVector",
]
