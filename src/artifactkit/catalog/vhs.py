from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "vhs"
VERSION = "0.10.0"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "Darwin_arm64",
    Platform.AARCH64_LINUX: "Linux_arm64",
    Platform.X86_64_DARWIN: "Darwin_x86_64",
    Platform.X86_64_LINUX: "Linux_x86_64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp vhs_{{version}}_{{system}}/vhs "$ARTIFACT_OUTPUT/bin/vhs"
    chmod +x "$ARTIFACT_OUTPUT/bin/vhs"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/charmbracelet/vhs/releases/download/v{VERSION}/"
                f"vhs_{VERSION}_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
