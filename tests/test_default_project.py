import pytest

from artifactkit.composer import ComposerState, ProjectComposer
from artifactkit.errors import ValidationError
from artifactkit.executors import InProcessExecutor
from artifactkit.models import DEFAULT_PLATFORMS, Platform
from artifactkit.project import SHARED, TOOLS, Project, ProjectEntry, catalog_project, default_project


@pytest.mark.parametrize("platform", DEFAULT_PLATFORMS, ids=str)
def test_default_project_submits_each_artifact_once(platform: Platform) -> None:
    executor = InProcessExecutor()
    composer = ProjectComposer(platform=platform, executor=executor)

    report = composer.compose(default_project())

    names = [submission.name for submission in executor.submissions]
    assert len(names) == 46
    assert len(set(names)) == 46
    assert names[:3] == ["protoc", "rust-toolchain", "dev"]
    assert report.artifact_count == 46
    assert composer.state is ComposerState.SUBMITTED
    assert composer.logger.records_for_operation("dedup_hit") == []


def test_tools_consume_the_shared_builds() -> None:
    executor = InProcessExecutor()
    composer = ProjectComposer(platform=Platform.X86_64_LINUX, executor=executor)
    composer.compose(default_project())
    shared = composer.artifacts

    gpg = executor.submissions_named("gpg")[0]
    assert gpg.inputs == (
        shared["libgpg-error"],
        shared["libassuan"],
        shared["libgcrypt"],
        shared["libksba"],
        shared["npth"],
    )
    tmux = executor.submissions_named("tmux")[0]
    assert tmux.inputs == (shared["libevent"], shared["ncurses"])
    readline = executor.submissions_named("readline")[0]
    assert readline.inputs == (shared["ncurses"],)
    for name in ("skopeo", "umoci"):
        assert executor.submissions_named(name)[0].inputs == (shared["go"],)


def test_default_project_is_deterministic() -> None:
    digests = []
    for _ in range(2):
        composer = ProjectComposer(platform=Platform.AARCH64_DARWIN)
        digests.append(composer.compose(default_project()).plan_digest)
    assert digests[0] == digests[1]


def test_default_project_layout() -> None:
    project = default_project()
    assert project.names == tuple(entry.name for entry in SHARED + TOOLS)
    assert len(SHARED) == 11
    assert len(TOOLS) == 32
    tools = [entry.name for entry in TOOLS]
    assert tools == sorted(tools)


def test_project_validation() -> None:
    with pytest.raises(ValidationError):
        Project(entries=())
    with pytest.raises(ValidationError):
        Project(entries=(ProjectEntry("jq"), ProjectEntry("jq")))
    with pytest.raises(ValidationError):
        Project(entries=(ProjectEntry("readline", {"ncurses": "ncurses"}), ProjectEntry("ncurses")))


def test_catalog_project_resolves_its_own_prerequisites() -> None:
    executor = InProcessExecutor()
    composer = ProjectComposer(platform=Platform.AARCH64_DARWIN, executor=executor)

    composer.compose(catalog_project(["json-c", "libuv"]))

    assert [s.name for s in executor.submissions][3:] == ["cmake", "json-c", "libuv"]
