"""Command line entry point.

Usage:
    artifactkit build [--platform P] [--only NAME ...] [--out DIR]
    artifactkit list [--json]
    artifactkit changed (--all | --list | BASE HEAD) [--dependents]
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from artifactkit.catalog import VERSIONS
from artifactkit.changes import changed_artifacts, discover_artifacts, git_changed_files
from artifactkit.composer import ProjectComposer
from artifactkit.errors import ArtifactKitError, ValidationError
from artifactkit.executors import InProcessExecutor
from artifactkit.models import DEFAULT_PLATFORMS
from artifactkit.platforms import coerce_platform, host_platform
from artifactkit.policy import Policy
from artifactkit.project import catalog_project, default_project

DEFAULT_LOCK = "artifactkit.lock"


def cmd_build(args: argparse.Namespace) -> int:
    platform = coerce_platform(args.platform) if args.platform else host_platform()
    executor = InProcessExecutor(output_dir=Path(args.out) if args.out else None)
    composer = ProjectComposer(
        platform=platform,
        executor=executor,
        policy=Policy(name_conflict=args.name_conflict, require_frozen_lock=args.require_frozen),
    )
    project = catalog_project(list(dict.fromkeys(args.only))) if args.only else default_project()
    try:
        report = composer.compose(project, frozen=args.frozen, lock_path=args.lock)
        if args.write_lock:
            composer.lock(args.lock)
    finally:
        if args.log:
            composer.logger.to_json_lines(args.log)

    print(f"Planned {report.artifact_count} artifacts for {platform.value}.")
    for ref in report.artifacts:
        print(f"  {ref.alias:<32} {ref.digest[:12]}")
    if report.output_dir is not None:
        print(f"Wrote plan and scripts to {report.output_dir}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    names = discover_artifacts()
    if args.json:
        print(json.dumps(names))
    else:
        for name in names:
            print(f"{name} {VERSIONS[name]}")
    return 0


def cmd_changed(args: argparse.Namespace) -> int:
    if args.all:
        print(json.dumps(discover_artifacts()))
        return 0
    if args.list:
        print("\n".join(discover_artifacts()))
        return 0
    if len(args.revisions) != 2:
        raise ValidationError(
            "Two revisions are required for comparison.",
            hint="Pass BASE HEAD, or --all / --list.",
        )
    base, head = args.revisions
    paths = git_changed_files(base, head, repo=args.repo)
    print(json.dumps(changed_artifacts(paths, include_dependents=args.dependents)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="artifactkit", description="Artifact build plan composer")
    sub = parser.add_subparsers(dest="command", required=True)

    build_p = sub.add_parser("build", help="Compose the project and run the in-process executor")
    build_p.add_argument(
        "--platform",
        choices=[platform.value for platform in DEFAULT_PLATFORMS],
        help="Target platform (defaults to the host)",
    )
    build_p.add_argument("--only", nargs="+", metavar="NAME", help="Build only these catalog artifacts")
    build_p.add_argument("--out", help="Write plan.json, plan.cbor and scripts to this directory")
    build_p.add_argument("--lock", default=DEFAULT_LOCK, help="Plan lock path")
    build_p.add_argument("--frozen", action="store_true", help="Fail unless the lock matches the plan")
    build_p.add_argument("--write-lock", action="store_true", help="Write the plan lock after building")
    build_p.add_argument(
        "--require-frozen",
        action="store_true",
        help="Refuse to run without --frozen",
    )
    build_p.add_argument(
        "--name-conflict",
        choices=["allow", "warn", "error"],
        default="warn",
        help="How to treat one artifact name built with different content",
    )
    build_p.add_argument("--log", help="Write structured log records as JSON lines")
    build_p.set_defaults(handler=cmd_build)

    list_p = sub.add_parser("list", help="List catalog artifacts")
    list_p.add_argument("--json", action="store_true", help="Print a JSON array")
    list_p.set_defaults(handler=cmd_list)

    changed_p = sub.add_parser("changed", help="Detect artifacts changed between two revisions")
    mode = changed_p.add_mutually_exclusive_group()
    mode.add_argument("--all", action="store_true", help="Print all artifacts as a JSON array")
    mode.add_argument("--list", action="store_true", help="Print all artifacts, one per line")
    changed_p.add_argument("revisions", nargs="*", metavar="REV", help="BASE and HEAD revisions")
    changed_p.add_argument(
        "--dependents",
        action="store_true",
        help="Include catalog artifacts that depend on a changed one",
    )
    changed_p.add_argument("--repo", default=".", help="Repository root")
    changed_p.set_defaults(handler=cmd_changed)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except ArtifactKitError as exc:
        print(f"error [{exc.code}]: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
