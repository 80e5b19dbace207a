"""Compose a small project: one shared library pinned for two consumers.

Run with ``python examples/custom_project.py [OUTPUT_DIR]``.
"""

from __future__ import annotations

import sys
from pathlib import Path

from artifactkit import ProjectComposer
from artifactkit.executors import InProcessExecutor
from artifactkit.platforms import host_platform
from artifactkit.project import Project, ProjectEntry


def main() -> int:
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("build/custom")
    composer = ProjectComposer(
        platform=host_platform(),
        executor=InProcessExecutor(output_dir=out),
    )
    project = Project(
        name="terminal",
        entries=(
            ProjectEntry("ncurses"),
            ProjectEntry("libevent"),
            ProjectEntry("tmux", {"ncurses": "ncurses", "libevent": "libevent"}),
            ProjectEntry("zsh", {"ncurses": "ncurses"}),
        ),
    )
    report = composer.compose(project)

    print(f"{report.artifact_count} artifacts, plan {report.plan_digest[:12]}")
    for ref in report.artifacts:
        print(f"  {ref.alias}")

    lock = composer.lock(out / "artifactkit.lock")
    print(f"lock written to {lock}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
