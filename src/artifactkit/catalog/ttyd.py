from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "ttyd"
VERSION = "1.7.7"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "ttyd_darwin.zip",
    Platform.AARCH64_LINUX: "ttyd.aarch64",
    Platform.X86_64_DARWIN: "ttyd_darwin.zip",
    Platform.X86_64_LINUX: "ttyd.x86_64",
}

LINUX_SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp ./source/{{name}}/{{system}} "$ARTIFACT_OUTPUT/bin/ttyd"
    chmod +x "$ARTIFACT_OUTPUT/bin/ttyd"
""")

DARWIN_SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp ttyd "$ARTIFACT_OUTPUT/bin/ttyd"
    chmod +x "$ARTIFACT_OUTPUT/bin/ttyd"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://github.com/tsl0922/ttyd/releases/download/{VERSION}/{{system}}",
            script=LINUX_SCRIPT,
            scripts={
                Platform.AARCH64_DARWIN: DARWIN_SCRIPT,
                Platform.X86_64_DARWIN: DARWIN_SCRIPT,
            },
        ),
    )
