from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "lima"
VERSION = "2.0.3"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "Darwin-arm64",
    Platform.AARCH64_LINUX: "Linux-aarch64",
    Platform.X86_64_DARWIN: "Darwin-x86_64",
    Platform.X86_64_LINUX: "Linux-x86_64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}
    cp -r bin "$ARTIFACT_OUTPUT/"
    cp -r libexec "$ARTIFACT_OUTPUT/"
    cp -r share "$ARTIFACT_OUTPUT/"
    chmod +x "$ARTIFACT_OUTPUT/bin/"*
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/lima-vm/lima/releases/download/v{VERSION}/"
                f"lima-{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
