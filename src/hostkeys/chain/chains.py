"""Key chains for private and public host keys."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from hostkeys.chain.key_chain import KeyChain, KeyChainItem, require_aware
from hostkeys.config import KeyChainPolicy
from hostkeys.exceptions import PreconditionError
from hostkeys.keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)


def _singleton_items(time: datetime, key: object, now: Optional[datetime]) -> list[KeyChainItem]:
    require_aware(time, "activation time")
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        require_aware(now, "reference time")
    if time > now:
        raise PreconditionError(
            f"The first key of a chain has to be active already, not from {time.isoformat()}"
        )
    return [KeyChainItem(time, key)]


def _require_keys(items: Sequence[KeyChainItem], key_type: type) -> None:
    for item in items:
        if not isinstance(item.key, key_type):
            raise PreconditionError(
                f"A {key_type.__name__} chain cannot hold a {type(item.key).__name__}"
            )


class PrivateKeyChain(KeyChain[PrivateKey]):
    """Rotation ledger of a host's private keys."""

    __slots__ = ()

    def __init__(
        self,
        items: Iterable[KeyChainItem[PrivateKey]],
        policy: Optional[KeyChainPolicy] = None,
    ) -> None:
        super().__init__(items, policy)
        _require_keys(self.items, PrivateKey)

    @classmethod
    def create(
        cls,
        time: datetime,
        key: PrivateKey,
        policy: Optional[KeyChainPolicy] = None,
        now: Optional[datetime] = None,
    ) -> PrivateKeyChain:
        """Start a chain with a single key that is active since *time*.

        Raises:
            PreconditionError: If *time* lies in the future.
        """
        chain = cls(_singleton_items(time, key, now), policy)
        logger.debug("Created private key chain starting at %s", time.isoformat())
        return chain

    def _rebuild(self, items: Sequence[KeyChainItem[PrivateKey]]) -> PrivateKeyChain:
        return PrivateKeyChain(items, self.policy)


class PublicKeyChain(KeyChain[PublicKey]):
    """Rotation ledger of a host's public keys."""

    __slots__ = ()

    def __init__(
        self,
        items: Iterable[KeyChainItem[PublicKey]],
        policy: Optional[KeyChainPolicy] = None,
    ) -> None:
        super().__init__(items, policy)
        _require_keys(self.items, PublicKey)

    @classmethod
    def create(
        cls,
        time: datetime,
        key: PublicKey,
        policy: Optional[KeyChainPolicy] = None,
        now: Optional[datetime] = None,
    ) -> PublicKeyChain:
        """Start a chain with a single key that is active since *time*.

        Raises:
            PreconditionError: If *time* lies in the future.
        """
        chain = cls(_singleton_items(time, key, now), policy)
        logger.debug("Created public key chain starting at %s", time.isoformat())
        return chain

    def _rebuild(self, items: Sequence[KeyChainItem[PublicKey]]) -> PublicKeyChain:
        return PublicKeyChain(items, self.policy)
