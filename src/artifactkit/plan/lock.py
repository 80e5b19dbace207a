"""Plan lock: pinned artifact digests for frozen submissions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from artifactkit.errors import LockfileError
from artifactkit.plan.model import BuildPlan

LOCK_VERSION = 1


@dataclass(frozen=True, slots=True)
class PlanLock:
    version: int
    platform: str
    plan_digest: str
    artifacts: dict[str, list[str]] = field(default_factory=dict)


def build_lock(plan: BuildPlan) -> PlanLock:
    artifacts: dict[str, list[str]] = {}
    for ref in plan.refs:
        artifacts.setdefault(ref.alias, []).append(ref.digest)
    return PlanLock(
        version=LOCK_VERSION,
        platform=plan.platform.value,
        plan_digest=plan.digest(),
        artifacts={alias: sorted(digests) for alias, digests in sorted(artifacts.items())},
    )


def verify_lock(lock: PlanLock, plan: BuildPlan, *, path: str | Path | None = None) -> None:
    """Raise :class:`LockfileError` when *lock* does not pin *plan* exactly."""
    context = {"operation": "submit", "mode": "frozen", "path": str(path or "")}
    if lock.platform != plan.platform.value:
        raise LockfileError(
            "Frozen lock was written for a different platform.",
            hint="Lock each platform separately.",
            context={**context, "expected": plan.platform.value, "actual": lock.platform},
        )
    current = build_lock(plan)
    if lock.plan_digest != current.plan_digest:
        changed = sorted(
            alias
            for alias in set(lock.artifacts) | set(current.artifacts)
            if lock.artifacts.get(alias) != current.artifacts.get(alias)
        )
        raise LockfileError(
            "Frozen lock is stale for the current build plan.",
            hint="Re-run the build with --write-lock and commit the updated lock.",
            context={
                **context,
                "expected": current.plan_digest,
                "actual": lock.plan_digest,
                "changed": ",".join(changed),
            },
        )


def serialize_lock(lock: PlanLock) -> str:
    payload = {
        "version": lock.version,
        "platform": lock.platform,
        "plan_digest": lock.plan_digest,
        "artifacts": lock.artifacts,
    }
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def parse_lock(raw: str) -> PlanLock:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LockfileError("Invalid lockfile JSON.", hint=str(exc)) from exc

    if not isinstance(payload, dict):
        raise LockfileError("Invalid lockfile payload type.")

    return PlanLock(
        version=_required_int(payload, "version"),
        platform=_required_str(payload, "platform"),
        plan_digest=_required_str(payload, "plan_digest"),
        artifacts=_required_artifacts(payload, "artifacts"),
    )


def read_lock(path: str | Path) -> PlanLock:
    lock_path = Path(path)
    try:
        raw = lock_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LockfileError(
            "Lockfile does not exist.",
            hint="Write a lock before using frozen mode.",
            context={"path": str(lock_path)},
        ) from exc
    return parse_lock(raw)


def write_lock(lock: PlanLock, path: str | Path) -> Path:
    lock_path = Path(path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    lock_path.write_text(serialize_lock(lock), encoding="utf-8")
    return lock_path


def _required_str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise LockfileError(f"Invalid lockfile `{key}` value.")
    return value


def _required_int(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if not isinstance(value, int):
        raise LockfileError(f"Invalid lockfile `{key}` value.")
    return value


def _required_artifacts(payload: dict[str, Any], key: str) -> dict[str, list[str]]:
    value = payload.get(key)
    if not isinstance(value, dict):
        raise LockfileError(f"Invalid lockfile `{key}` value.")
    parsed: dict[str, list[str]] = {}
    for alias, digests in value.items():
        if not isinstance(alias, str):
            raise LockfileError("Invalid lockfile artifact key.")
        if not isinstance(digests, list) or not all(isinstance(item, str) for item in digests):
            raise LockfileError("Invalid lockfile artifact digest list.")
        parsed[alias] = list(digests)
    return parsed
