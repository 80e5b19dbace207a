from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "bottom"
VERSION = "0.11.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "aarch64-apple-darwin",
    Platform.AARCH64_LINUX: "aarch64-unknown-linux-gnu",
    Platform.X86_64_DARWIN: "x86_64-apple-darwin",
    Platform.X86_64_LINUX: "x86_64-unknown-linux-musl",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp btm "$ARTIFACT_OUTPUT/bin/btm"
    chmod +x "$ARTIFACT_OUTPUT/bin/btm"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/ClementTsang/bottom/releases/download/{VERSION}/"
                f"bottom_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
