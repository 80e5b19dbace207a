from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "just"
VERSION = "1.45.0"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "aarch64-apple-darwin",
    Platform.AARCH64_LINUX: "aarch64-unknown-linux-musl",
    Platform.X86_64_DARWIN: "x86_64-apple-darwin",
    Platform.X86_64_LINUX: "x86_64-unknown-linux-musl",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp just "$ARTIFACT_OUTPUT/bin/just"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/casey/just/releases/download/{VERSION}/"
                f"just-{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
