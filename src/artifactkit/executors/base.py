"""Protocol for build executors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from artifactkit.models import ArtifactRef, BuildSubmission, Platform
from artifactkit.plan import BuildPlan


@dataclass(frozen=True, slots=True)
class RunReport:
    executor: str
    platform: Platform
    plan_digest: str
    artifacts: tuple[ArtifactRef, ...] = ()
    output_dir: Path | None = None
    files: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def artifact_count(self) -> int:
        return len(self.artifacts)


class BuildExecutor(Protocol):
    name: str

    def submit(self, submission: BuildSubmission) -> ArtifactRef:
        """Accept one build submission and return the handle to its output."""

    def run(self, plan: BuildPlan) -> RunReport:
        """Execute every accepted submission of *plan*."""
