from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "golangci-lint"
VERSION = "2.7.2"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "darwin-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}/golangci-lint-{{version}}-{{system}}
    cp golangci-lint "$ARTIFACT_OUTPUT/bin/golangci-lint"
    chmod +x "$ARTIFACT_OUTPUT/bin/golangci-lint"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/golangci/golangci-lint/releases/download/v{VERSION}/"
                f"golangci-lint-{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
