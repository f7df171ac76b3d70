"""Registry configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Self, cast

AMBIGUITY_POLICY_ENV = "UNIVERSAL_IDENTITY_AMBIGUITY_POLICY"

AmbiguityPolicy = Literal["warn", "raise"]


@dataclass(frozen=True)
class RegistryConfig:
    """Settings for an IdentityRegistry.

    Attributes:
        ambiguity_policy: What ``check_ambiguities`` does with ambiguous
            signatures: ``"warn"`` logs them, ``"raise"`` raises
            AmbiguousDispatchError.
    """

    ambiguity_policy: AmbiguityPolicy = "warn"

    def __post_init__(self) -> None:
        if self.ambiguity_policy not in ("warn", "raise"):
            raise ValueError(f"Unknown ambiguity policy: {self.ambiguity_policy!r}")

    @classmethod
    def from_env(cls) -> Self:
        """Build a config from ``UNIVERSAL_IDENTITY_AMBIGUITY_POLICY``."""
        policy = os.environ.get(AMBIGUITY_POLICY_ENV, "warn").strip().lower()
        return cls(ambiguity_policy=cast(AmbiguityPolicy, policy))
