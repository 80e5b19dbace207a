import warnings
from dataclasses import replace

import pytest

from artifactkit.errors import (
    DependencyResolutionFailure,
    PolicyError,
    UnsupportedPlatform,
    ValidationError,
)
from artifactkit.executors import InProcessExecutor
from artifactkit.models import ArtifactRef, Platform
from artifactkit.policy import Policy
from artifactkit.recipe import PLACEHOLDER, RecipeSpec, Slot
from artifactkit.resolver import resolve_or_build
from artifactkit.session import ResolutionSession


def test_leaf_recipe_issues_one_submission(
    session: ResolutionSession, executor: InProcessExecutor, leaf: RecipeSpec
) -> None:
    ref = session.build(leaf)

    assert len(executor.submissions) == 1
    submission = executor.submissions[0]
    assert ref == ArtifactRef(name="leaf", version="1.0", digest=submission.digest())
    assert submission.inputs == ()
    assert submission.source is not None
    assert submission.source.location == "https://example.invalid/leaf-1.0.tar.gz"
    assert "leaf-1.0" in submission.script


def test_mid_depending_on_leaf_substitutes_the_leaf_ref(
    session: ResolutionSession, executor: InProcessExecutor, mid: RecipeSpec
) -> None:
    mid_ref = session.build(mid)

    assert [s.name for s in executor.submissions] == ["leaf", "mid"]
    leaf_ref = session.plan().artifacts_named("leaf")[0]
    mid_submission = executor.submissions[1]
    assert mid_submission.inputs == (leaf_ref,)
    assert f'-I{leaf_ref.env_key}/include' in mid_submission.script
    assert "{{leaf}}" not in mid_submission.script
    assert mid_ref.name == "mid"


def test_shared_default_is_built_once(
    session: ResolutionSession,
    executor: InProcessExecutor,
    consumer_a: RecipeSpec,
    consumer_b: RecipeSpec,
) -> None:
    a_ref = session.build(consumer_a)
    b_ref = session.build(consumer_b)

    assert [s.name for s in executor.submissions] == ["shared", "a", "b"]
    shared_ref = session.plan().artifacts_named("shared")[0]
    assert executor.submissions[1].inputs == (shared_ref,)
    assert executor.submissions[2].inputs == (shared_ref,)
    assert a_ref != b_ref
    assert len(session.logger.records_for_operation("dedup_hit")) == 1


def test_override_and_default_dedup_are_equivalent(
    consumer_a: RecipeSpec, consumer_b: RecipeSpec, shared: RecipeSpec
) -> None:
    by_default = ResolutionSession(platform=Platform.X86_64_LINUX, executor=InProcessExecutor())
    by_default.build(consumer_a)
    by_default.build(consumer_b)

    by_override = ResolutionSession(platform=Platform.X86_64_LINUX, executor=InProcessExecutor())
    shared_ref = by_override.build(shared)
    by_override.build(consumer_a, shared=shared_ref)
    by_override.build(consumer_b.with_override("shared", shared_ref))

    assert len(by_override) == 3
    assert by_override.plan().digest() == by_default.plan().digest()
    assert len(by_override.logger.records_for_operation("resolve_override")) == 2


def test_unsupported_recipe_issues_zero_submissions(
    executor: InProcessExecutor, linux_only: RecipeSpec
) -> None:
    session = ResolutionSession(platform=Platform.AARCH64_DARWIN, executor=executor)

    with pytest.raises(UnsupportedPlatform) as excinfo:
        session.build(linux_only)

    assert excinfo.value.recipe == "linux-only"
    assert excinfo.value.platform == "aarch64-darwin"
    assert executor.submissions == []
    assert len(session.logger.records_for_operation("unsupported_platform")) == 1


def test_unsupported_owner_fails_before_resolving_slots(
    executor: InProcessExecutor, leaf: RecipeSpec
) -> None:
    owner = RecipeSpec.portable(
        "owner",
        "1",
        script="cp -r {{leaf}} $ARTIFACT_OUTPUT",
        platforms=(Platform.X86_64_LINUX,),
        slots=(Slot("leaf", leaf),),
    )
    session = ResolutionSession(platform=Platform.AARCH64_DARWIN, executor=executor)

    with pytest.raises(UnsupportedPlatform):
        session.build(owner)

    assert executor.submissions == []


def test_unsupported_dependency_is_wrapped_with_its_cause(
    executor: InProcessExecutor, linux_only: RecipeSpec
) -> None:
    owner = RecipeSpec.portable(
        "owner",
        "1",
        script="cp -r {{dep}} $ARTIFACT_OUTPUT",
        slots=(Slot("dep", linux_only),),
    )
    session = ResolutionSession(platform=Platform.AARCH64_DARWIN, executor=executor)

    with pytest.raises(DependencyResolutionFailure) as excinfo:
        session.build(owner)

    error = excinfo.value
    assert error.recipe == "owner"
    assert error.slot == "dep"
    assert isinstance(error.__cause__, UnsupportedPlatform)
    assert isinstance(error.root_cause, UnsupportedPlatform)
    assert error.context["cause"] == "UnsupportedPlatform"
    assert executor.submissions == []


def test_nested_failures_keep_the_root_cause(
    executor: InProcessExecutor, linux_only: RecipeSpec
) -> None:
    middle = RecipeSpec.portable(
        "middle", "1", script="cp {{dep}} .", slots=(Slot("dep", linux_only),)
    )
    top = RecipeSpec.portable("top", "1", script="cp {{middle}} .", slots=(Slot("middle", middle),))
    session = ResolutionSession(platform=Platform.X86_64_DARWIN, executor=executor)

    with pytest.raises(DependencyResolutionFailure) as excinfo:
        session.build(top)

    assert excinfo.value.slot == "middle"
    assert isinstance(excinfo.value.cause, DependencyResolutionFailure)
    assert isinstance(excinfo.value.root_cause, UnsupportedPlatform)


def test_override_short_circuits_the_default_recipe(
    executor: InProcessExecutor, leaf: RecipeSpec, linux_only: RecipeSpec
) -> None:
    owner = RecipeSpec.portable(
        "owner",
        "1",
        script="cp -r {{dep}} $ARTIFACT_OUTPUT",
        slots=(Slot("dep", linux_only),),
    )
    session = ResolutionSession(platform=Platform.AARCH64_DARWIN, executor=executor)
    stand_in = session.build(leaf)

    ref = session.build(owner, dep=stand_in)

    assert [s.name for s in executor.submissions] == ["leaf", "owner"]
    assert executor.submissions[1].inputs == (stand_in,)
    assert stand_in.env_key in executor.submissions[1].script
    assert ref.name == "owner"


def test_resolve_or_build_returns_override_without_building(
    session: ResolutionSession, executor: InProcessExecutor, leaf: RecipeSpec, mid: RecipeSpec
) -> None:
    built = session.build(leaf)

    assert resolve_or_build(session, mid, built) == built
    assert [s.name for s in executor.submissions] == ["leaf"]

    other = resolve_or_build(session, mid)
    assert other.name == "mid"
    assert len(executor.submissions) == 2


def test_override_from_outside_the_session_is_rejected(
    session: ResolutionSession, executor: InProcessExecutor, leaf: RecipeSpec
) -> None:
    elsewhere = ResolutionSession(platform=Platform.X86_64_LINUX, executor=InProcessExecutor())
    foreign = elsewhere.build(leaf)

    with pytest.raises(ValidationError) as excinfo:
        resolve_or_build(session, leaf, foreign, slot="leaf")

    assert excinfo.value.context["slot"] == "leaf"
    assert excinfo.value.context["digest"] == foreign.digest
    assert executor.submissions == []
    assert len(session.logger.records_for_operation("override_rejected")) == 1


def test_unknown_ref_bound_to_a_slot_fails_at_build_time(
    session: ResolutionSession, executor: InProcessExecutor, mid: RecipeSpec
) -> None:
    invented = ArtifactRef(name="leaf", version="1.0", digest="aa" * 32)

    with pytest.raises(DependencyResolutionFailure) as excinfo:
        session.build(mid, leaf=invented)

    error = excinfo.value
    assert error.recipe == "mid"
    assert error.slot == "leaf"
    assert isinstance(error.root_cause, ValidationError)
    assert executor.submissions == []
    assert len(session) == 0


def test_building_twice_is_idempotent(
    session: ResolutionSession, executor: InProcessExecutor, mid: RecipeSpec
) -> None:
    first = session.build(mid)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        second = session.build(mid)

    assert first == second
    assert len(executor.submissions) == 2
    assert session.logger.records_for_operation("name_conflict") == []


def test_same_identity_with_different_script_is_reported(
    session: ResolutionSession, executor: InProcessExecutor
) -> None:
    first = session.build(RecipeSpec.portable("x", "1", script="echo one"))

    with pytest.warns(RuntimeWarning, match="different content"):
        second = session.build(RecipeSpec.portable("x", "1", script="echo two"))

    assert second == first
    assert len(executor.submissions) == 1
    conflicts = session.logger.records_for_operation("name_conflict")
    assert len(conflicts) == 1
    assert conflicts[0]["extra"]["existing"] == first.digest


def test_same_identity_with_different_source_fails_under_error_policy(
    executor: InProcessExecutor,
) -> None:
    session = ResolutionSession(
        platform=Platform.X86_64_LINUX,
        executor=executor,
        policy=Policy(name_conflict="error"),
    )
    session.build(RecipeSpec.portable("x", "1", script="echo", source="https://example.invalid/a"))

    with pytest.raises(PolicyError) as excinfo:
        session.build(RecipeSpec.portable("x", "1", script="echo", source="https://example.invalid/b"))

    assert excinfo.value.context["name"] == "x"
    assert "Bump the version" in str(excinfo.value.hint)
    assert len(executor.submissions) == 1


def test_different_inputs_are_distinct_instances(
    session: ResolutionSession, executor: InProcessExecutor, leaf: RecipeSpec, mid: RecipeSpec
) -> None:
    default_ref = session.build(mid)
    with pytest.warns(RuntimeWarning):
        older = session.build(replace(leaf, version="0.9"))
        override_ref = session.build(mid, leaf=older)

    assert default_ref != override_ref
    assert [s.name for s in executor.submissions] == ["leaf", "mid", "leaf", "mid"]
    assert executor.submissions[-1].inputs == (older,)


def test_slot_inputs_reuse_resolved_siblings(
    session: ResolutionSession, executor: InProcessExecutor, leaf: RecipeSpec, mid: RecipeSpec
) -> None:
    top = RecipeSpec.portable(
        "top",
        "1",
        script="cp {{leaf}} {{mid}} .",
        slots=(Slot("leaf", leaf), Slot("mid", mid, inputs={"leaf": "leaf"})),
    )
    pinned = session.build(replace(leaf, version="1.1"))

    session.build(top, leaf=pinned)

    assert [s.name for s in executor.submissions] == ["leaf", "mid", "top"]
    assert executor.submissions[1].inputs == (pinned,)


def test_unknown_override_is_rejected(session: ResolutionSession, mid: RecipeSpec) -> None:
    ref = ArtifactRef(name="leaf", version="1.0", digest="aa" * 32)
    with pytest.raises(ValidationError):
        session.build(mid, ncurses=ref)


def test_submitted_scripts_have_no_placeholders(
    session: ResolutionSession, executor: InProcessExecutor, mid: RecipeSpec
) -> None:
    session.build(mid)
    for submission in executor.submissions:
        assert PLACEHOLDER.search(submission.script) is None
