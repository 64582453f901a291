"""
Host Keys

Private and public keys of a host, the subgroup proof carried by every
public key, verifiable encryption, and integer field records for external
serializers.
"""

from .fields import PrivateKeyFields, PublicKeyFields
from .proof import SubgroupProof
from .private_key import PrivateKey
from .public_key import PublicKey
from .encryption import VerifiableEncryption
from .key_pair import KeyPair

__all__ = [
    "PrivateKeyFields",
    "PublicKeyFields",
    "SubgroupProof",
    "PrivateKey",
    "PublicKey",
    "VerifiableEncryption",
    "KeyPair",
]
