from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "fd"
VERSION = "10.2.0"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "aarch64-apple-darwin",
    Platform.AARCH64_LINUX: "aarch64-unknown-linux-gnu",
    Platform.X86_64_DARWIN: "x86_64-apple-darwin",
    Platform.X86_64_LINUX: "x86_64-unknown-linux-musl",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp */fd "$ARTIFACT_OUTPUT/bin/fd"
    chmod +x "$ARTIFACT_OUTPUT/bin/fd"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/sharkdp/fd/releases/download/v{VERSION}/"
                f"fd-v{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
