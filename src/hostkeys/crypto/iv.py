"""Initialization vectors for symmetric ciphers."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers import modes

from hostkeys.constants import INITIALIZATION_VECTOR_LENGTH
from hostkeys.exceptions import InitializationVectorError


@dataclass(frozen=True)
class InitializationVector:
    """An immutable 16-byte initialization vector.

    Example:
        >>> iv = InitializationVector.generate()
        >>> len(iv)
        16
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise InitializationVectorError(
                f"An initialization vector is built from bytes, not {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", bytes(self.value))
        if len(self.value) != INITIALIZATION_VECTOR_LENGTH:
            raise InitializationVectorError(
                f"An initialization vector has {INITIALIZATION_VECTOR_LENGTH} bytes, "
                f"got {len(self.value)}"
            )

    @staticmethod
    def random_bytes() -> bytes:
        """Return fresh bytes from the operating system's CSPRNG."""
        return secrets.token_bytes(INITIALIZATION_VECTOR_LENGTH)

    @classmethod
    def generate(cls) -> InitializationVector:
        return cls(cls.random_bytes())

    @classmethod
    def from_bytes(cls, value: bytes) -> InitializationVector:
        """Wrap existing bytes, e.g. an IV received alongside a ciphertext.

        Raises:
            InitializationVectorError: If ``value`` is not 16 bytes long.
        """
        return cls(value)

    def cipher_mode(self) -> modes.CBC:
        """Return a CBC mode object for use with ``cryptography`` ciphers."""
        return modes.CBC(self.value)

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        return f"InitializationVector({self.value.hex()})"
