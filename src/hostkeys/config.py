"""
Key Chain Policy

Timing rules applied when keys are rotated into a key chain.
"""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from hostkeys.constants import (
    DEFAULT_RETENTION_WINDOW,
    DEFAULT_ROTATION_LEAD_TIME,
    ENV_RETENTION_DAYS,
    ENV_ROTATION_LEAD_DAYS,
)


def _days(variable: str, raw: str) -> timedelta:
    try:
        return timedelta(days=float(raw))
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"{variable} must be a number of days, got {raw!r}") from exc


class KeyChainPolicy(BaseModel):
    """Timing policy for key rotation.

    Attributes:
        rotation_lead_time: How far in the future a new key's activation
            time must lie when it is added, so that relying parties can
            fetch it before it becomes authoritative.
        retention_window: How long superseded keys are kept before they are
            pruned from the chain.
    """

    model_config = {"frozen": True}

    rotation_lead_time: timedelta = Field(
        default=DEFAULT_ROTATION_LEAD_TIME,
        description="Minimum lead time between adding a key and its activation",
    )
    retention_window: timedelta = Field(
        default=DEFAULT_RETENTION_WINDOW,
        description="Age after which old keys are pruned on rotation",
    )

    @field_validator("rotation_lead_time", "retention_window")
    @classmethod
    def _must_be_positive(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("Policy durations must be positive")
        return value

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "KeyChainPolicy":
        """Build a policy, letting environment variables override the defaults.

        ``HOSTKEYS_ROTATION_LEAD_DAYS`` and ``HOSTKEYS_RETENTION_DAYS`` are
        read as (possibly fractional) numbers of days.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            The resulting policy.
        """
        if environ is None:
            lead_days = os.getenv(ENV_ROTATION_LEAD_DAYS)
            retention_days = os.getenv(ENV_RETENTION_DAYS)
        else:
            lead_days = environ.get(ENV_ROTATION_LEAD_DAYS)
            retention_days = environ.get(ENV_RETENTION_DAYS)

        overrides: dict[str, timedelta] = {}
        if lead_days:
            overrides["rotation_lead_time"] = _days(ENV_ROTATION_LEAD_DAYS, lead_days)
        if retention_days:
            overrides["retention_window"] = _days(ENV_RETENTION_DAYS, retention_days)
        return cls(**overrides)


DEFAULT_POLICY = KeyChainPolicy()
