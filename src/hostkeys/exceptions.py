# Copyright (c) HostKeys Contributors. All rights reserved.
# Licensed under the MIT License.
"""Centralized exception hierarchy for HostKeys.

Caller mistakes (bad group membership, invalid key material, early or
out-of-order rotations) derive from PreconditionError. A key chain that no
longer covers a requested time raises KeyNotFoundError, which callers are
expected to handle. A missing hash primitive is a broken deployment and is
reported as CryptoUnavailableError, outside the HostKeysError tree.
"""


class HostKeysError(Exception):
    """Base exception for all recoverable HostKeys errors."""


class PreconditionError(HostKeysError):
    """A caller passed values that violate an operation's precondition."""


class GroupMismatchError(PreconditionError):
    """An element or key belongs to a different group than required."""


class KeyValidationError(PreconditionError):
    """Key material failed a construction-time invariant."""


class SubgroupProofError(KeyValidationError):
    """The subgroup membership proof of a public key does not verify."""


class RotationError(PreconditionError):
    """A key was added to a key chain with an invalid activation time."""


class InitializationVectorError(PreconditionError):
    """An initialization vector has the wrong length."""


class DecryptionError(PreconditionError):
    """A verifiable encryption could not be decrypted with the given key."""


class KeyNotFoundError(HostKeysError):
    """No key in a key chain was active at the requested time."""


class CryptoUnavailableError(RuntimeError):
    """A required cryptographic primitive is missing from the environment."""


__all__ = [
    "HostKeysError",
    "PreconditionError",
    "GroupMismatchError",
    "KeyValidationError",
    "SubgroupProofError",
    "RotationError",
    "InitializationVectorError",
    "DecryptionError",
    "KeyNotFoundError",
    "CryptoUnavailableError",
]
