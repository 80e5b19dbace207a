from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "ripgrep"
VERSION = "14.1.1"

# x86_64 Linux ships a static musl build; aarch64 Linux only a glibc one.
SYSTEMS = {
    Platform.AARCH64_DARWIN: "aarch64-apple-darwin",
    Platform.AARCH64_LINUX: "aarch64-unknown-linux-gnu",
    Platform.X86_64_DARWIN: "x86_64-apple-darwin",
    Platform.X86_64_LINUX: "x86_64-unknown-linux-musl",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp */rg "$ARTIFACT_OUTPUT/bin/rg"
    chmod +x "$ARTIFACT_OUTPUT/bin/rg"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/BurntSushi/ripgrep/releases/download/{VERSION}/"
                f"ripgrep-{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
