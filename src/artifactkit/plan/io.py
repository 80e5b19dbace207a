"""Build plan parser and serializer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from artifactkit.errors import ValidationError
from artifactkit.models import ArtifactRef, BuildSubmission, Platform, SourceSpec
from artifactkit.plan.model import BuildPlan, PlanEntry


def serialize_plan(plan: BuildPlan) -> str:
    return plan.to_json()


def parse_plan(raw: str) -> BuildPlan:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError("Invalid build plan JSON.", hint=str(exc)) from exc

    if not isinstance(payload, dict):
        raise ValidationError("Invalid build plan payload type.")

    schema_version = _required_int(payload, "schema_version")
    platform = _platform(_required_str(payload, "platform"))
    artifacts_raw = payload.get("artifacts")
    if not isinstance(artifacts_raw, list):
        raise ValidationError("Invalid build plan `artifacts` value.")
    aliases_raw = payload.get("aliases", {})
    if not isinstance(aliases_raw, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in aliases_raw.items()
    ):
        raise ValidationError("Invalid build plan `aliases` value.")
    return BuildPlan(
        platform=platform,
        entries=tuple(_parse_entry(item) for item in artifacts_raw),
        aliases=dict(aliases_raw),
        schema_version=schema_version,
    )


def read_plan(path: str | Path) -> BuildPlan:
    plan_path = Path(path)
    try:
        raw = plan_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValidationError(
            "Build plan does not exist.",
            context={"path": str(plan_path)},
        ) from exc
    return parse_plan(raw)


def write_plan(plan: BuildPlan, path: str | Path) -> Path:
    plan_path = Path(path)
    plan_path.parent.mkdir(parents=True, exist_ok=True)
    plan_path.write_text(serialize_plan(plan), encoding="utf-8")
    return plan_path


def _parse_entry(item: Any) -> PlanEntry:
    if not isinstance(item, dict):
        raise ValidationError("Invalid artifact entry in build plan.")
    name = _required_str(item, "name")
    version = _required_str(item, "version")
    inputs_raw = item.get("inputs", [])
    if not isinstance(inputs_raw, list):
        raise ValidationError("Invalid build plan `inputs` value.", context={"artifact": name})
    submission = BuildSubmission(
        name=name,
        version=version,
        platform=_platform(_required_str(item, "platform")),
        inputs=tuple(_parse_ref(ref) for ref in inputs_raw),
        source=_parse_source(item.get("source")),
        script=_required_str(item, "script"),
        environments=tuple(_string_list(item, "environments")),
        systems=tuple(_platform(value) for value in _string_list(item, "systems")),
        aliases=tuple(_string_list(item, "aliases")),
    )
    ref = ArtifactRef(name=name, version=version, digest=_required_str(item, "digest"))
    return PlanEntry(ref=ref, submission=submission)


def _parse_ref(item: Any) -> ArtifactRef:
    if not isinstance(item, dict):
        raise ValidationError("Invalid input reference in build plan.")
    return ArtifactRef(
        name=_required_str(item, "name"),
        version=_required_str(item, "version"),
        digest=_required_str(item, "digest"),
    )


def _parse_source(item: Any) -> SourceSpec | None:
    if item is None:
        return None
    if not isinstance(item, dict):
        raise ValidationError("Invalid source descriptor in build plan.")
    return SourceSpec(
        name=_required_str(item, "name"),
        location=_required_str(item, "location"),
        includes=tuple(_string_list(item, "includes")),
    )


def _platform(value: str) -> Platform:
    try:
        return Platform(value)
    except ValueError as exc:
        raise ValidationError(
            "Invalid platform in build plan.",
            context={"platform": value},
        ) from exc


def _required_str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Invalid build plan `{key}` value.")
    return value


def _required_int(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if not isinstance(value, int):
        raise ValidationError(f"Invalid build plan `{key}` value.")
    return value


def _string_list(payload: dict[str, Any], key: str) -> list[str]:
    value = payload.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError(f"Invalid build plan `{key}` value.")
    return list(value)
