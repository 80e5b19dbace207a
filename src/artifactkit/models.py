"""Core typed dataclasses shared by recipes, the resolver, and executors."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal

Arch = Literal["aarch64", "x86_64"]
Os = Literal["darwin", "linux"]

# Runtime variables bound by the executor when a step runs.
OUTPUT_DIR = "$ARTIFACT_OUTPUT"
ENV_KEY_PREFIX = "ARTIFACT_"


class Platform(StrEnum):
    """Closed set of target platforms. New platforms are added here only."""

    AARCH64_DARWIN = "aarch64-darwin"
    AARCH64_LINUX = "aarch64-linux"
    X86_64_DARWIN = "x86_64-darwin"
    X86_64_LINUX = "x86_64-linux"

    @property
    def arch(self) -> Arch:
        arch, _, _ = self.value.partition("-")
        return "aarch64" if arch == "aarch64" else "x86_64"

    @property
    def os(self) -> Os:
        return "darwin" if self.value.endswith("-darwin") else "linux"


DEFAULT_PLATFORMS: tuple[Platform, ...] = (
    Platform.AARCH64_DARWIN,
    Platform.AARCH64_LINUX,
    Platform.X86_64_DARWIN,
    Platform.X86_64_LINUX,
)


@dataclass(frozen=True, slots=True)
class ArtifactRef:
    """Opaque handle to the eventual output tree of one build submission."""

    name: str
    version: str
    digest: str

    @property
    def env_key(self) -> str:
        """Substitution value the executor binds to this artifact's output directory."""
        return f"${ENV_KEY_PREFIX}{self.digest}"

    @property
    def alias(self) -> str:
        return f"{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.env_key


@dataclass(frozen=True, slots=True)
class PlatformVariant:
    """Platform-specific source location and build-script template."""

    source: str | None
    script: str
    environments: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SourceSpec:
    """Source-fetch descriptor handed to the executor."""

    name: str
    location: str
    includes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RecipeKey:
    """Identity of one build request inside a resolution session."""

    name: str
    version: str
    platform: Platform
    inputs: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class BuildSubmission:
    """Everything the executor receives for one artifact build."""

    name: str
    version: str
    platform: Platform
    inputs: tuple[ArtifactRef, ...]
    source: SourceSpec | None
    script: str
    environments: tuple[str, ...] = ()
    systems: tuple[Platform, ...] = ()
    aliases: tuple[str, ...] = ()

    def digest(self) -> str:
        canonical = json.dumps(self.content_payload(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def content_payload(self) -> dict[str, Any]:
        """Canonical content of the submission; aliases are naming, not content."""
        return {
            "name": self.name,
            "version": self.version,
            "platform": self.platform.value,
            "inputs": [ref.digest for ref in self.inputs],
            "source": None
            if self.source is None
            else {
                "name": self.source.name,
                "location": self.source.location,
                "includes": list(self.source.includes),
            },
            "script": self.script,
            "environments": list(self.environments),
            "systems": [system.value for system in self.systems],
        }


__all__ = [
    "Arch",
    "ArtifactRef",
    "BuildSubmission",
    "DEFAULT_PLATFORMS",
    "ENV_KEY_PREFIX",
    "OUTPUT_DIR",
    "Os",
    "Platform",
    "PlatformVariant",
    "RecipeKey",
    "SourceSpec",
]
