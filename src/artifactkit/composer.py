"""Project composer: runs one resolution session end to end."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from artifactkit.environment import dev_environment
from artifactkit.errors import ArtifactKitError, LockfileError, SubmissionFailure, ValidationError
from artifactkit.executors import BuildExecutor, InProcessExecutor, RunReport
from artifactkit.models import ArtifactRef, Platform
from artifactkit.observability import StructuredLogger
from artifactkit.plan import BuildPlan, build_lock, read_lock, validate_plan, verify_lock, write_lock
from artifactkit.platforms import coerce_platform
from artifactkit.policy import Policy, ensure_submit_policy
from artifactkit.project import Project
from artifactkit.recipe import RecipeSpec
from artifactkit.session import ResolutionSession


class ComposerState(StrEnum):
    EMPTY = "empty"
    DEV_ENV_BUILT = "dev_env_built"
    ARTIFACTS_QUEUED = "artifacts_queued"
    SUBMITTED = "submitted"
    FAILED = "failed"


@dataclass(slots=True)
class ProjectComposer:
    """Builds the development environment, queues artifacts, then submits the plan.

    Calls must follow ``build_dev_environment() -> queue()... -> submit()``.
    Any error raised while building or submitting moves the composer to
    ``FAILED``; a failed composer refuses further work.
    """

    platform: Platform
    executor: BuildExecutor = field(default_factory=InProcessExecutor)
    policy: Policy = field(default_factory=Policy)
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    session: ResolutionSession = field(init=False, repr=False)
    environment: ArtifactRef | None = field(init=False, default=None)
    report: RunReport | None = field(init=False, default=None)
    _state: ComposerState = field(init=False, default=ComposerState.EMPTY)
    _artifacts: dict[str, ArtifactRef] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.platform = coerce_platform(self.platform)
        self.session = ResolutionSession(
            platform=self.platform,
            executor=self.executor,
            policy=self.policy,
            logger=self.logger,
        )

    @property
    def state(self) -> ComposerState:
        return self._state

    @property
    def artifacts(self) -> dict[str, ArtifactRef]:
        return dict(self._artifacts)

    def plan(self) -> BuildPlan:
        return self.session.plan()

    def build_dev_environment(
        self,
        recipe: RecipeSpec | None = None,
        **overrides: ArtifactRef | None,
    ) -> ArtifactRef:
        self._require("build_dev_environment", ComposerState.EMPTY)
        with self._failing():
            ref = self.session.build(recipe or dev_environment(), **overrides)
        self.environment = ref
        self._transition(ComposerState.DEV_ENV_BUILT)
        return ref

    def queue(
        self,
        recipe: RecipeSpec,
        *,
        label: str | None = None,
        **overrides: ArtifactRef | None,
    ) -> ArtifactRef:
        self._require("queue", ComposerState.DEV_ENV_BUILT, ComposerState.ARTIFACTS_QUEUED)
        with self._failing():
            ref = self.session.build(recipe, **overrides)
        self._artifacts[label or recipe.name] = ref
        if self._state is not ComposerState.ARTIFACTS_QUEUED:
            self._transition(ComposerState.ARTIFACTS_QUEUED)
        return ref

    def lock(self, path: str | Path) -> Path:
        self._require("lock", ComposerState.ARTIFACTS_QUEUED, ComposerState.SUBMITTED)
        lock_path = write_lock(build_lock(self.plan()), path)
        self.logger.log(
            operation="lock",
            recipe=None,
            platform=self.platform.value,
            message="Wrote plan lock.",
            extra={"path": str(lock_path)},
        )
        return lock_path

    def submit(self, *, frozen: bool = False, lock_path: str | Path | None = None) -> RunReport:
        self._require("submit", ComposerState.ARTIFACTS_QUEUED)
        with self._failing():
            ensure_submit_policy(policy=self.policy, frozen=frozen)
            plan = self.plan()
            validate_plan(plan)
            if frozen:
                if lock_path is None:
                    raise LockfileError(
                        "Frozen submission requires a lock path.",
                        hint="Pass lock_path= or write one with lock().",
                        context={"operation": "submit", "mode": "frozen"},
                    )
                verify_lock(read_lock(lock_path), plan, path=lock_path)
            try:
                report = self.executor.run(plan)
            except ArtifactKitError:
                raise
            except Exception as exc:
                raise SubmissionFailure(
                    "plan",
                    self.platform.value,
                    cause=exc,
                    hint="The executor failed while running the build plan.",
                ) from exc
        self.report = report
        self.logger.log(
            operation="run",
            recipe=None,
            platform=self.platform.value,
            message="Executor ran build plan.",
            extra={"executor": report.executor, "artifacts": report.artifact_count},
        )
        self._transition(ComposerState.SUBMITTED)
        return report

    def compose(
        self,
        project: Project,
        *,
        frozen: bool = False,
        lock_path: str | Path | None = None,
    ) -> RunReport:
        """Run *project* end to end, halting at the first fatal error."""
        self.build_dev_environment(project.environment)
        for entry in project.entries:
            overrides = {slot: self._artifacts[source] for slot, source in entry.overrides.items()}
            with self._failing():
                recipe = entry.resolve_recipe()
            self.queue(recipe, label=entry.name, **overrides)
        return self.submit(frozen=frozen, lock_path=lock_path)

    def _require(self, operation: str, *allowed: ComposerState) -> None:
        if self._state is ComposerState.FAILED:
            raise ValidationError(
                "Composer has already failed.",
                hint="Start a new composer for another attempt.",
                context={"operation": operation, "state": self._state.value},
            )
        if self._state not in allowed:
            raise ValidationError(
                f"{operation}() called out of order.",
                hint="Call build_dev_environment(), then queue(), then submit().",
                context={
                    "operation": operation,
                    "state": self._state.value,
                    "expected": ",".join(state.value for state in allowed),
                },
            )

    @contextmanager
    def _failing(self) -> Iterator[None]:
        try:
            yield
        except Exception:
            self._transition(ComposerState.FAILED, level="error")
            raise

    def _transition(self, state: ComposerState, *, level: str = "info") -> None:
        previous = self._state
        self._state = state
        self.logger.log(
            operation="composer_transition",
            recipe=None,
            platform=self.platform.value,
            level=level,
            message=f"Composer moved from {previous.value} to {state.value}.",
            extra={"from": previous.value, "to": state.value},
        )


__all__ = ["ComposerState", "ProjectComposer"]
