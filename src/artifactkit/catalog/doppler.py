from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "doppler"
VERSION = "3.75.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "macOS_arm64",
    Platform.AARCH64_LINUX: "linux_arm64",
    Platform.X86_64_DARWIN: "macOS_amd64",
    Platform.X86_64_LINUX: "linux_amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp doppler "$ARTIFACT_OUTPUT/bin/doppler"
    chmod +x "$ARTIFACT_OUTPUT/bin/doppler"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/DopplerHQ/cli/releases/download/{VERSION}/"
                f"doppler_{VERSION}_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
