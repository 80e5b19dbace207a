"""Detect which catalog artifacts a set of changed files affects."""

from __future__ import annotations

import re
import subprocess
from collections.abc import Iterable
from pathlib import Path

from artifactkit.catalog import CATALOG
from artifactkit.errors import ValidationError
from artifactkit.recipe import RecipeSpec

CATALOG_DIR = "src/artifactkit/catalog"
_CATALOG_FILE = re.compile(r"^" + re.escape(CATALOG_DIR) + r"/([A-Za-z0-9_]+)\.py$")


def discover_artifacts() -> list[str]:
    return sorted(CATALOG)


def artifact_for_path(path: str | Path) -> str | None:
    """Map a repository-relative catalog module path to its artifact name.

    The name is derived from the file name alone, so a module removed from the
    catalog is still reported.
    """
    match = _CATALOG_FILE.match(Path(path).as_posix())
    if match is None:
        return None
    module = match.group(1)
    if module.startswith("_"):
        return None
    return module.replace("_", "-")


def changed_artifacts(
    paths: Iterable[str | Path],
    *,
    include_dependents: bool = False,
) -> list[str]:
    changed = {name for name in (artifact_for_path(path) for path in paths) if name is not None}
    if include_dependents and changed:
        graph = dependency_graph()
        changed |= {name for name, deps in graph.items() if deps & changed}
    return sorted(changed)


def dependency_graph() -> dict[str, set[str]]:
    """Transitive default-slot dependencies of every catalog recipe."""
    return {name: _default_dependencies(factory()) for name, factory in CATALOG.items()}


def git_changed_files(base: str, head: str, *, repo: str | Path = ".") -> list[str]:
    cmd = ["git", "-C", str(repo), "diff", "--name-only", base, head]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise ValidationError(
            "git executable was not found.",
            hint="Install git or pass changed paths explicitly.",
            context={"command": " ".join(cmd)},
        ) from exc
    if result.returncode != 0:
        raise ValidationError(
            "git diff failed.",
            hint="Check that both revisions exist in the repository.",
            context={
                "returncode": str(result.returncode),
                "stderr": result.stderr[:2000] if result.stderr else "",
                "command": " ".join(cmd),
            },
        )
    return [line for line in result.stdout.splitlines() if line.strip()]


def _default_dependencies(recipe: RecipeSpec) -> set[str]:
    found: set[str] = set()
    for slot in recipe.slots:
        found.add(slot.default.name)
        found |= _default_dependencies(slot.default)
    return found


__all__ = [
    "CATALOG_DIR",
    "artifact_for_path",
    "changed_artifacts",
    "dependency_graph",
    "discover_artifacts",
    "git_changed_files",
]
