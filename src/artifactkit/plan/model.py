"""Build plan model, export, and structural validation."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import cbor2

from artifactkit.errors import ValidationError
from artifactkit.models import ArtifactRef, BuildSubmission, Platform


@dataclass(frozen=True, slots=True)
class PlanEntry:
    ref: ArtifactRef
    submission: BuildSubmission


@dataclass(frozen=True, slots=True)
class BuildPlan:
    """Ordered, dependency-first list of accepted build submissions."""

    platform: Platform
    entries: tuple[PlanEntry, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=dict)
    schema_version: int = 1

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def refs(self) -> tuple[ArtifactRef, ...]:
        return tuple(entry.ref for entry in self.entries)

    def artifacts_named(self, name: str) -> tuple[ArtifactRef, ...]:
        return tuple(entry.ref for entry in self.entries if entry.ref.name == name)

    def resolve_alias(self, alias: str) -> ArtifactRef | None:
        digest = self.aliases.get(alias)
        if digest is None:
            return None
        for entry in self.entries:
            if entry.ref.digest == digest:
                return entry.ref
        return None

    def digest(self) -> str:
        canonical = json.dumps(self.payload(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self.payload(), indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self.payload(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def payload(self) -> dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "platform": self.platform.value,
            "artifacts": [_entry_payload(entry) for entry in self.entries],
            "aliases": dict(sorted(self.aliases.items())),
        }


def validate_plan(plan: BuildPlan) -> None:
    """Check that the plan is duplicate-free and dependency-ordered."""
    seen: set[str] = set()
    for entry in plan.entries:
        digest = entry.ref.digest
        if digest in seen:
            raise ValidationError(
                "Build plan contains a duplicate submission.",
                context={"artifact": entry.ref.alias, "digest": digest},
            )
        for dependency in entry.submission.inputs:
            if dependency.digest not in seen:
                raise ValidationError(
                    "Build plan lists an artifact before one of its inputs.",
                    hint="Submissions must be recorded after every artifact they consume.",
                    context={"artifact": entry.ref.alias, "input": dependency.alias},
                )
        seen.add(digest)
    for alias, digest in plan.aliases.items():
        if digest not in seen:
            raise ValidationError(
                "Build plan alias points at an unknown artifact.",
                context={"alias": alias, "digest": digest},
            )


def _entry_payload(entry: PlanEntry) -> dict[str, Any]:
    submission = entry.submission
    payload = submission.content_payload()
    payload["digest"] = entry.ref.digest
    payload["inputs"] = [_ref_payload(ref) for ref in submission.inputs]
    payload["aliases"] = list(submission.aliases)
    return payload


def _ref_payload(ref: ArtifactRef) -> dict[str, str]:
    return {"name": ref.name, "version": ref.version, "digest": ref.digest}
