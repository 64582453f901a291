"""
Key Rotation Chains

Time-ordered, retention-bounded key ledgers that let relying parties
resolve the key that was authoritative at any retained point in time.
"""

from .key_chain import KeyChain, KeyChainItem
from .chains import PrivateKeyChain, PublicKeyChain

__all__ = [
    "KeyChain",
    "KeyChainItem",
    "PrivateKeyChain",
    "PublicKeyChain",
]
