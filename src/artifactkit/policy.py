"""Policy configuration and enforcement helpers."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Literal

from artifactkit.errors import PolicyError

NameConflictPolicy = Literal["allow", "warn", "error"]


@dataclass(frozen=True, slots=True)
class Policy:
    name_conflict: NameConflictPolicy = "warn"
    require_frozen_lock: bool = False
    register_aliases: bool = True


def ensure_submit_policy(*, policy: Policy, frozen: bool) -> None:
    if policy.require_frozen_lock and not frozen:
        raise PolicyError(
            "Frozen lock mode is required by policy.",
            hint="Call submit(frozen=True) or relax policy.require_frozen_lock.",
            context={"operation": "submit"},
        )


def ensure_name_available(
    *,
    policy: Policy,
    name: str,
    existing_digest: str | None,
    digest: str,
    hint: str | None = None,
) -> bool:
    """Apply the name-conflict policy; return ``True`` when a conflict was seen."""
    if existing_digest is None or existing_digest == digest:
        return False
    if policy.name_conflict == "error":
        raise PolicyError(
            f"Artifact name '{name}' was already submitted with different content.",
            hint=hint or "Pass the shared artifact as an override instead of rebuilding it.",
            context={"operation": "submit", "name": name, "existing": existing_digest},
        )
    if policy.name_conflict == "warn":
        warnings.warn(
            f"Artifact '{name}' is built more than once with different content in this session.",
            RuntimeWarning,
            stacklevel=3,
        )
    return True
