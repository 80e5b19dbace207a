"""Shared test fixtures."""

from __future__ import annotations

import pytest

from artifactkit.executors import InProcessExecutor
from artifactkit.models import Platform
from artifactkit.recipe import RecipeSpec, Slot
from artifactkit.session import ResolutionSession

LEAF_SCRIPT = 'mkdir -p "$ARTIFACT_OUTPUT"\necho {{name}}-{{version}} > "$ARTIFACT_OUTPUT/id"\n'


@pytest.fixture
def executor() -> InProcessExecutor:
    """Provide an in-process executor that records every submission."""
    return InProcessExecutor()


@pytest.fixture
def session(executor: InProcessExecutor) -> ResolutionSession:
    return ResolutionSession(platform=Platform.X86_64_LINUX, executor=executor)


@pytest.fixture
def leaf() -> RecipeSpec:
    return RecipeSpec.portable(
        "leaf",
        "1.0",
        source="https://example.invalid/leaf-1.0.tar.gz",
        script=LEAF_SCRIPT,
    )


@pytest.fixture
def mid(leaf: RecipeSpec) -> RecipeSpec:
    return RecipeSpec.portable(
        "mid",
        "2.0",
        source="https://example.invalid/mid-2.0.tar.gz",
        script='export CPPFLAGS="-I{{leaf}}/include"\nmake PREFIX="$ARTIFACT_OUTPUT" install\n',
        slots=(Slot("leaf", leaf),),
    )


@pytest.fixture
def shared() -> RecipeSpec:
    return RecipeSpec.portable("shared", "0.1", script=LEAF_SCRIPT)


@pytest.fixture
def consumer_a(shared: RecipeSpec) -> RecipeSpec:
    return RecipeSpec.portable(
        "a",
        "1.0",
        script='cp -r {{shared}}/lib "$ARTIFACT_OUTPUT/lib"\n',
        slots=(Slot("shared", shared),),
    )


@pytest.fixture
def consumer_b(shared: RecipeSpec) -> RecipeSpec:
    return RecipeSpec.portable(
        "b",
        "1.0",
        script='ln -s {{shared}}/bin "$ARTIFACT_OUTPUT/bin"\n',
        slots=(Slot("shared", shared),),
    )


@pytest.fixture
def linux_only() -> RecipeSpec:
    return RecipeSpec.portable(
        "linux-only",
        "1.0",
        script=LEAF_SCRIPT,
        platforms=(Platform.AARCH64_LINUX, Platform.X86_64_LINUX),
    )
