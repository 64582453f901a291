"""
Key Chains

Immutable ledgers of (activation time, key) items that support key
rotation. Items are kept newest first and strictly descending by time.
Adding a key never modifies a chain; it returns a new chain, so any holder
of an older chain keeps a consistent snapshot and concurrent readers need
no locking. Replacing "the current chain" is up to the caller.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar

from hostkeys.config import DEFAULT_POLICY, KeyChainPolicy
from hostkeys.exceptions import KeyNotFoundError, PreconditionError, RotationError

logger = logging.getLogger(__name__)

K = TypeVar("K")
C = TypeVar("C", bound="KeyChain")


def require_aware(time: datetime, what: str) -> None:
    if not isinstance(time, datetime):
        raise PreconditionError(f"The {what} has to be a datetime, got {type(time).__name__}")
    if time.tzinfo is None or time.utcoffset() is None:
        raise PreconditionError(f"The {what} has to be timezone-aware")


@dataclass(frozen=True)
class KeyChainItem(Generic[K]):
    """A key together with the time from which on it is valid."""

    time: datetime
    key: K


class KeyChain(abc.ABC, Generic[K]):
    """Ordered, retention-bounded ledger of keys.

    Args:
        items: The items, newest first, strictly descending by time.
        policy: Rotation lead time and retention window applied by ``add``.

    Raises:
        PreconditionError: If ``items`` is empty, contains naive times or is
            not strictly descending.
    """

    __slots__ = ("_items", "_policy")

    def __init__(
        self,
        items: Iterable[KeyChainItem[K]],
        policy: Optional[KeyChainPolicy] = None,
    ) -> None:
        items = tuple(items)
        if not items:
            raise PreconditionError("A key chain contains at least one key")
        for item in items:
            require_aware(item.time, "time of a key chain item")
        for newer, older in zip(items, items[1:]):
            if not newer.time > older.time:
                raise PreconditionError("The items of a key chain are strictly descending by time")

        self._items: tuple[KeyChainItem[K], ...] = items
        self._policy = policy or DEFAULT_POLICY

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[KeyChainItem[K], ...]:
        """The items of this chain, newest first."""
        return self._items

    @property
    def policy(self) -> KeyChainPolicy:
        return self._policy

    @property
    def newest_time(self) -> datetime:
        return self._items[0].time

    def get_newest_time(self) -> datetime:
        """Return the activation time of the newest key."""
        return self.newest_time

    def get_key(self, time: datetime) -> K:
        """Return the key that was in use at *time*.

        Raises:
            KeyNotFoundError: If the chain has no key for *time*, either
                because it predates the oldest retained key or because that
                key has been pruned.
        """
        require_aware(time, "lookup time")
        for item in self._items:
            if time >= item.time:
                return item.key
        raise KeyNotFoundError(
            f"There is no key for {time.isoformat()} in this key chain "
            f"(oldest retained key is from {self._items[-1].time.isoformat()})"
        )

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def add(self: C, time: datetime, key: K, now: Optional[datetime] = None) -> C:
        """Return a new chain with *key* valid from *time* on.

        Keys older than the retention window are pruned from the result:
        the first item older than ``now - retention_window`` and every item
        after it are dropped. This chain is left untouched.

        Args:
            time: Activation time of the new key.
            key: The new key.
            now: Reference time for the policy checks; defaults to the
                current UTC time.

        Returns:
            A new chain of the same type and policy.

        Raises:
            RotationError: If *time* is not after the newest time, or not at
                least the rotation lead time in the future.
        """
        require_aware(time, "activation time")
        if now is None:
            now = datetime.now(timezone.utc)
        else:
            require_aware(now, "reference time")

        if not time > self.newest_time:
            raise RotationError(
                f"The activation time {time.isoformat()} has to be after the newest "
                f"time {self.newest_time.isoformat()} of this key chain"
            )
        if not time > now + self._policy.rotation_lead_time:
            raise RotationError(
                f"The activation time {time.isoformat()} has to lie more than "
                f"{self._policy.rotation_lead_time} in the future"
            )

        items = [KeyChainItem(time, key), *self._items]
        cutoff = now - self._policy.retention_window
        for index, item in enumerate(items):
            if item.time < cutoff:
                del items[index:]
                break

        logger.info(
            "Rotated %s: new key active from %s, %d retained, %d pruned",
            type(self).__name__,
            time.isoformat(),
            len(items),
            len(self._items) + 1 - len(items),
        )
        return self._rebuild(items)

    @abc.abstractmethod
    def _rebuild(self: C, items: Sequence[KeyChainItem[K]]) -> C:
        """Return a chain of this concrete type with the given items."""

    # ------------------------------------------------------------------
    # Object protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[KeyChainItem[K]]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items == other._items and self._policy == other._policy

    def __hash__(self) -> int:
        return hash((type(self), self._items, self._policy))

    def __repr__(self) -> str:
        times = ", ".join(item.time.isoformat() for item in self._items)
        return f"{type(self).__name__}([{times}])"
