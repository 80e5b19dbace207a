from pathlib import Path

import pytest

from artifactkit.composer import ComposerState, ProjectComposer
from artifactkit.errors import (
    DependencyResolutionFailure,
    LockfileError,
    PolicyError,
    SubmissionFailure,
    UnsupportedPlatform,
    ValidationError,
)
from artifactkit.executors import InProcessExecutor
from artifactkit.models import BuildSubmission, Platform
from artifactkit.plan import BuildPlan
from artifactkit.policy import Policy
from artifactkit.project import Project, ProjectEntry
from artifactkit.recipe import RecipeSpec


def _composer(**kwargs: object) -> ProjectComposer:
    return ProjectComposer(platform=Platform.X86_64_LINUX, **kwargs)  # type: ignore[arg-type]


def _queued(leaf: RecipeSpec, **kwargs: object) -> ProjectComposer:
    composer = _composer(**kwargs)
    composer.build_dev_environment()
    composer.queue(leaf)
    return composer


def test_happy_path_moves_through_every_state(leaf: RecipeSpec, mid: RecipeSpec) -> None:
    composer = _composer()
    assert composer.state is ComposerState.EMPTY

    env_ref = composer.build_dev_environment()
    assert composer.state is ComposerState.DEV_ENV_BUILT
    assert env_ref.name == "dev"
    assert composer.environment == env_ref

    composer.queue(leaf)
    composer.queue(mid, label="middle")
    assert composer.state is ComposerState.ARTIFACTS_QUEUED
    assert set(composer.artifacts) == {"leaf", "middle"}

    report = composer.submit()
    assert composer.state is ComposerState.SUBMITTED
    assert report.artifact_count == len(composer.plan())
    assert report.plan_digest == composer.plan().digest()
    assert composer.report == report

    transitions = composer.logger.records_for_operation("composer_transition")
    assert [record["extra"]["to"] for record in transitions] == [
        "dev_env_built",
        "artifacts_queued",
        "submitted",
    ]


def test_dev_environment_submits_its_toolchains_first() -> None:
    executor = InProcessExecutor()
    composer = _composer(executor=executor)
    composer.build_dev_environment()
    assert [s.name for s in executor.submissions] == ["protoc", "rust-toolchain", "dev"]


@pytest.mark.parametrize("operation", ["queue", "submit"])
def test_out_of_order_calls_are_rejected(operation: str, leaf: RecipeSpec) -> None:
    composer = _composer()

    with pytest.raises(ValidationError) as excinfo:
        if operation == "queue":
            composer.queue(leaf)
        else:
            composer.submit()

    assert excinfo.value.context["state"] == "empty"
    assert composer.state is ComposerState.EMPTY


def test_submit_requires_queued_artifacts() -> None:
    composer = _composer()
    composer.build_dev_environment()
    with pytest.raises(ValidationError):
        composer.submit()
    with pytest.raises(ValidationError):
        composer.build_dev_environment()
    assert composer.state is ComposerState.DEV_ENV_BUILT


def test_failure_moves_to_failed_and_refuses_further_work(
    leaf: RecipeSpec, linux_only: RecipeSpec
) -> None:
    composer = ProjectComposer(platform=Platform.AARCH64_DARWIN)
    composer.build_dev_environment()

    with pytest.raises(UnsupportedPlatform):
        composer.queue(linux_only)

    assert composer.state is ComposerState.FAILED
    with pytest.raises(ValidationError) as excinfo:
        composer.queue(leaf)
    assert excinfo.value.context["state"] == "failed"


def test_submitted_composer_refuses_more_work(leaf: RecipeSpec) -> None:
    composer = _queued(leaf)
    composer.submit()
    with pytest.raises(ValidationError):
        composer.queue(leaf)
    with pytest.raises(ValidationError):
        composer.submit()


def test_executor_run_failure_becomes_submission_failure(leaf: RecipeSpec) -> None:
    class CrashingExecutor(InProcessExecutor):
        def run(self, plan: BuildPlan):  # type: ignore[override]
            raise OSError("disk full")

    composer = _queued(leaf, executor=CrashingExecutor())

    with pytest.raises(SubmissionFailure) as excinfo:
        composer.submit()

    assert isinstance(excinfo.value.__cause__, OSError)
    assert composer.state is ComposerState.FAILED
    assert composer.report is None


def test_compose_passes_earlier_entries_as_overrides(shared: RecipeSpec, consumer_a: RecipeSpec) -> None:
    executor = InProcessExecutor()
    project = Project(
        entries=(
            ProjectEntry("shared", recipe=shared),
            ProjectEntry("a", {"shared": "shared"}, recipe=consumer_a),
        )
    )

    composer = _composer(executor=executor)
    composer.compose(project)

    shared_ref = composer.artifacts["shared"]
    assert executor.submissions_named("a")[0].inputs == (shared_ref,)
    assert len(executor.submissions_named("shared")) == 1
    assert composer.state is ComposerState.SUBMITTED


def test_compose_halts_on_first_error(leaf: RecipeSpec, linux_only: RecipeSpec) -> None:
    executor = InProcessExecutor()
    project = Project(
        entries=(
            ProjectEntry("linux-only", recipe=linux_only),
            ProjectEntry("leaf", recipe=leaf),
        )
    )
    composer = ProjectComposer(platform=Platform.X86_64_DARWIN, executor=executor)

    with pytest.raises(UnsupportedPlatform):
        composer.compose(project)

    assert composer.state is ComposerState.FAILED
    assert executor.submissions_named("leaf") == []
    assert executor.runs == []


def test_compose_unknown_catalog_entry_fails() -> None:
    composer = _composer()
    with pytest.raises(ValidationError):
        composer.compose(Project(entries=(ProjectEntry("no-such-tool"),)))
    assert composer.state is ComposerState.FAILED


def test_frozen_submit_requires_a_lock(tmp_path: Path, leaf: RecipeSpec) -> None:
    composer = _queued(leaf)
    with pytest.raises(LockfileError):
        composer.submit(frozen=True, lock_path=tmp_path / "missing.lock")
    assert composer.state is ComposerState.FAILED

    composer = _queued(leaf)
    with pytest.raises(LockfileError):
        composer.submit(frozen=True)


def test_frozen_submit_accepts_a_matching_lock(tmp_path: Path, leaf: RecipeSpec) -> None:
    lock_path = tmp_path / "artifactkit.lock"
    _queued(leaf).lock(lock_path)

    composer = _queued(leaf)
    report = composer.submit(frozen=True, lock_path=lock_path)
    assert report.plan_digest == composer.plan().digest()


def test_frozen_submit_rejects_a_stale_lock(tmp_path: Path, leaf: RecipeSpec, mid: RecipeSpec) -> None:
    lock_path = tmp_path / "artifactkit.lock"
    _queued(leaf).lock(lock_path)

    composer = _queued(leaf)
    composer.queue(mid)
    with pytest.raises(LockfileError) as excinfo:
        composer.submit(frozen=True, lock_path=lock_path)
    assert "mid:2.0" in excinfo.value.context["changed"]


def test_policy_can_require_frozen_mode(leaf: RecipeSpec) -> None:
    composer = _queued(leaf, policy=Policy(require_frozen_lock=True))
    with pytest.raises(PolicyError):
        composer.submit()
    assert composer.state is ComposerState.FAILED


def test_lock_is_written_and_logged(tmp_path: Path, leaf: RecipeSpec) -> None:
    composer = _queued(leaf)
    path = composer.lock(tmp_path / "nested" / "artifactkit.lock")
    assert path.exists()
    assert composer.logger.records_for_operation("lock")[0]["extra"]["path"] == str(path)


def test_lock_before_queue_is_rejected(tmp_path: Path) -> None:
    composer = _composer()
    with pytest.raises(ValidationError):
        composer.lock(tmp_path / "artifactkit.lock")


def test_queue_accepts_overrides(mid: RecipeSpec, shared: RecipeSpec) -> None:
    executor = InProcessExecutor()
    composer = _composer(executor=executor)
    composer.build_dev_environment()
    shared_ref = composer.queue(shared)

    composer.queue(mid, leaf=shared_ref)

    submission: BuildSubmission = executor.submissions_named("mid")[0]
    assert submission.inputs == (shared_ref,)
    assert executor.submissions_named("leaf") == []
    assert composer.submit().artifact_count == len(composer.plan())


def test_queue_rejects_refs_built_elsewhere(leaf: RecipeSpec, mid: RecipeSpec) -> None:
    executor = InProcessExecutor()
    composer = _composer(executor=executor)
    composer.build_dev_environment()
    foreign = _composer().session.build(leaf)
    submitted = len(executor.submissions)

    with pytest.raises(DependencyResolutionFailure) as excinfo:
        composer.queue(mid, leaf=foreign)

    assert excinfo.value.slot == "leaf"
    assert isinstance(excinfo.value.root_cause, ValidationError)
    assert len(executor.submissions) == submitted
    assert composer.state is ComposerState.FAILED
    with pytest.raises(ValidationError):
        composer.submit()
