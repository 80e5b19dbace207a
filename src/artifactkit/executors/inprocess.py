"""In-process build executor for testing and development.

Records submissions and derives artifact digests without running any build
step. When configured with an output directory, ``run()`` writes the plan
(JSON and canonical CBOR) and one shell script per submission, which makes it
suitable for:
- Unit tests that verify the resolution pipeline
- Inspecting the plan a project produces before handing it to a real executor
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from artifactkit.compiler import emit_scripts
from artifactkit.executors.base import RunReport
from artifactkit.models import ArtifactRef, BuildSubmission
from artifactkit.plan import BuildPlan, validate_plan


@dataclass(slots=True)
class InProcessExecutor:
    """Executor that accepts every submission and keeps them in memory."""

    output_dir: Path | None = None
    name: str = "inprocess"
    submissions: list[BuildSubmission] = field(default_factory=list)
    runs: list[RunReport] = field(default_factory=list)

    def submit(self, submission: BuildSubmission) -> ArtifactRef:
        self.submissions.append(submission)
        return ArtifactRef(
            name=submission.name,
            version=submission.version,
            digest=submission.digest(),
        )

    def run(self, plan: BuildPlan) -> RunReport:
        validate_plan(plan)
        files: list[Path] = []
        output_dir = None
        if self.output_dir is not None:
            output_dir = Path(self.output_dir)
            emission = emit_scripts(plan, output_dir)
            cbor_path = output_dir / "plan.cbor"
            plan.to_cbor(cbor_path)
            files.extend([emission.plan_path, cbor_path, *emission.scripts.values()])
        report = RunReport(
            executor=self.name,
            platform=plan.platform,
            plan_digest=plan.digest(),
            artifacts=plan.refs,
            output_dir=output_dir,
            files=tuple(files),
        )
        self.runs.append(report)
        return report

    def submissions_named(self, name: str) -> list[BuildSubmission]:
        return [submission for submission in self.submissions if submission.name == name]
