from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "fluxcd"
VERSION = "2.7.5"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin_arm64",
    Platform.AARCH64_LINUX: "linux_arm64",
    Platform.X86_64_DARWIN: "darwin_amd64",
    Platform.X86_64_LINUX: "linux_amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp flux "$ARTIFACT_OUTPUT/bin/flux"
    chmod +x "$ARTIFACT_OUTPUT/bin/flux"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/fluxcd/flux2/releases/download/v{VERSION}/"
                f"flux_{VERSION}_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
