"""
HostKeys - Key Model for Identity and Credential Hosts

Keys · Proofs · Rotation

Asymmetric host keys with CRT-accelerated private exponentiation, public
keys that carry a Fiat-Shamir subgroup membership proof, and immutable key
chains for rotating keys while old material stays verifiable.

Version: 1.0.0
"""

__version__ = "1.0.0"

# Group arithmetic
from .groups import (
    Exponent,
    Element,
    Group,
    GroupWithKnownOrder,
    GroupWithUnknownOrder,
)

# Hashing and IVs
from .crypto import generate_hash, InitializationVector

# Keys
from .keys import (
    PrivateKey,
    PublicKey,
    SubgroupProof,
    VerifiableEncryption,
    KeyPair,
    PrivateKeyFields,
    PublicKeyFields,
)

# Key chains
from .chain import KeyChain, KeyChainItem, PrivateKeyChain, PublicKeyChain

# Configuration
from .config import KeyChainPolicy, DEFAULT_POLICY

# Exceptions
from .exceptions import (
    HostKeysError,
    PreconditionError,
    GroupMismatchError,
    KeyValidationError,
    SubgroupProofError,
    RotationError,
    InitializationVectorError,
    DecryptionError,
    KeyNotFoundError,
    CryptoUnavailableError,
)

__all__ = [
    # Version
    "__version__",

    # Group arithmetic
    "Exponent",
    "Element",
    "Group",
    "GroupWithKnownOrder",
    "GroupWithUnknownOrder",

    # Hashing and IVs
    "generate_hash",
    "InitializationVector",

    # Keys
    "PrivateKey",
    "PublicKey",
    "SubgroupProof",
    "VerifiableEncryption",
    "KeyPair",
    "PrivateKeyFields",
    "PublicKeyFields",

    # Key chains
    "KeyChain",
    "KeyChainItem",
    "PrivateKeyChain",
    "PublicKeyChain",

    # Configuration
    "KeyChainPolicy",
    "DEFAULT_POLICY",

    # Exceptions
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
