"""Per-artifact shell script emission."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from artifactkit.errors import ValidationError
from artifactkit.models import BuildSubmission
from artifactkit.plan import BuildPlan, write_plan


@dataclass(frozen=True, slots=True)
class ScriptEmission:
    platform: str
    directory: Path
    plan_path: Path
    scripts: dict[str, Path] = field(default_factory=dict)


def emit_scripts(plan: BuildPlan, destination: str | Path) -> ScriptEmission:
    """Write ``plan.json`` and one executable script per submission, in plan order."""
    root = Path(destination)
    scripts_dir = root / "scripts"
    scripts_dir.mkdir(parents=True, exist_ok=True)
    width = max(3, len(str(len(plan))))
    scripts: dict[str, Path] = {}
    for index, entry in enumerate(plan.entries, start=1):
        script_name = f"{index:0{width}d}-{entry.ref.name}-{entry.ref.digest[:12]}.sh"
        script_path = scripts_dir / script_name
        script_path.write_text(render_script(entry.submission), encoding="utf-8")
        script_path.chmod(0o755)
        scripts[entry.ref.digest] = script_path
    plan_path = write_plan(plan, root / "plan.json")
    return ScriptEmission(
        platform=plan.platform.value,
        directory=root,
        plan_path=plan_path,
        scripts=scripts,
    )


def render_script(submission: BuildSubmission) -> str:
    lines = [
        "#!/usr/bin/env bash",
        f"# {submission.name} {submission.version} ({submission.platform.value})",
        "set -euo pipefail",
    ]
    if submission.source is not None:
        lines.append(f"# source: {submission.source.location}")
    for entry in submission.environments:
        key, sep, value = entry.partition("=")
        if not sep:
            raise ValidationError(
                "Environment entries must have the form KEY=value.",
                context={"artifact": submission.name, "entry": entry},
            )
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'export {key}="{escaped}"')
    lines.append("")
    lines.append(submission.script.rstrip())
    return "\n".join(lines) + "\n"
