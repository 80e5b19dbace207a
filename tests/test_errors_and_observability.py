import json
from pathlib import Path

from artifactkit.errors import (
    DependencyResolutionFailure,
    ErrorCode,
    LockfileError,
    PolicyError,
    SubmissionFailure,
    UnsupportedPlatform,
    ValidationError,
)
from artifactkit.observability import StructuredLogger
from artifactkit.recipe import RecipeSpec
from artifactkit.session import ResolutionSession


def test_error_codes_are_stable_and_machine_readable() -> None:
    unsupported = UnsupportedPlatform("json-c", "x86_64-linux")
    errors = [
        ValidationError("bad input"),
        unsupported,
        DependencyResolutionFailure("tmux", "libevent", unsupported),
        SubmissionFailure("jq", "x86_64-linux"),
        LockfileError("lock mismatch"),
        PolicyError("frozen required"),
    ]
    assert [error.code for error in errors] == [
        ErrorCode.VALIDATION.value,
        ErrorCode.UNSUPPORTED_PLATFORM.value,
        ErrorCode.DEPENDENCY_RESOLUTION.value,
        ErrorCode.SUBMISSION.value,
        ErrorCode.LOCKFILE.value,
        ErrorCode.POLICY.value,
    ]


def test_error_to_dict_includes_hint_and_context() -> None:
    error = ValidationError("bad slot", hint="rename it", context={"slot": "lib-foo"})
    payload = error.to_dict()

    assert payload["code"] == "E_VALIDATION"
    assert payload["hint"] == "rename it"
    assert payload["context"] == {"slot": "lib-foo"}
    assert "Hint: rename it" in str(payload["message"])
    assert "slot: lib-foo" in str(payload["message"])


def test_dependency_failure_reports_the_root_cause() -> None:
    root = UnsupportedPlatform("json-c", "aarch64-linux", supported=("aarch64-darwin",))
    inner = DependencyResolutionFailure("middle", "json_c", root, platform="aarch64-linux")
    outer = DependencyResolutionFailure("top", "middle", inner)

    assert outer.root_cause is root
    assert outer.context["cause"] == "UnsupportedPlatform"
    assert "json-c" in outer.context["detail"]
    assert inner.context["platform"] == "aarch64-linux"


def test_submission_failure_records_the_cause() -> None:
    error = SubmissionFailure("jq", "x86_64-linux", cause=TimeoutError("no answer"))
    assert error.context["cause"] == "TimeoutError: no answer"
    assert error.recipe == "jq"


def test_logger_filters_and_exports_json_lines(
    tmp_path: Path, session: ResolutionSession, mid: RecipeSpec
) -> None:
    session.build(mid)
    logger = session.logger

    submits = logger.records_for_operation("submit")
    assert [record["recipe"] for record in submits] == ["leaf", "mid"]
    assert all(record["platform"] == "x86_64-linux" for record in logger.records)
    defaults = logger.records_for_operation("resolve_default")
    assert any(record["slot"] == "leaf" for record in defaults)
    assert logger.records_for_recipe("mid")

    path = logger.to_json_lines(tmp_path / "logs" / "session.jsonl")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(logger.records)
    assert json.loads(lines[0])["operation"] == logger.records[0]["operation"]


def test_logger_records_extra_fields() -> None:
    logger = StructuredLogger()
    logger.log(
        operation="run",
        recipe=None,
        platform="x86_64-linux",
        message="done",
        extra={"artifacts": 3},
    )
    assert logger.records == [
        {
            "level": "info",
            "operation": "run",
            "recipe": None,
            "platform": "x86_64-linux",
            "slot": None,
            "message": "done",
            "extra": {"artifacts": 3},
        }
    ]
