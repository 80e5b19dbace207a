from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "cue"
VERSION = "0.15.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin_arm64",
    Platform.AARCH64_LINUX: "linux_arm64",
    Platform.X86_64_DARWIN: "darwin_amd64",
    Platform.X86_64_LINUX: "linux_amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp cue "$ARTIFACT_OUTPUT/bin/cue"
    chmod +x "$ARTIFACT_OUTPUT/bin/cue"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/cue-lang/cue/releases/download/v{VERSION}/"
                f"cue_v{VERSION}_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
