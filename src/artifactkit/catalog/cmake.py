from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "cmake"
VERSION = "4.2.3"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "macos-universal",
    Platform.AARCH64_LINUX: "linux-aarch64",
    Platform.X86_64_DARWIN: "macos-universal",
    Platform.X86_64_LINUX: "linux-x86_64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp -v ./source/{{name}}/{{name}}-{{version}}-{{system}}/bin/* "$ARTIFACT_OUTPUT/bin/"
    cp -rv ./source/{{name}}/{{name}}-{{version}}-{{system}}/share "$ARTIFACT_OUTPUT/share"
""")

DARWIN_SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp -v ./source/{{name}}/{{name}}-{{version}}-{{system}}/CMake.app/Contents/bin/* "$ARTIFACT_OUTPUT/bin/"
    cp -rv ./source/{{name}}/{{name}}-{{version}}-{{system}}/CMake.app/Contents/share "$ARTIFACT_OUTPUT/share"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/Kitware/CMake/releases/download/v{VERSION}/"
                f"cmake-{VERSION}-{{system}}.tar.gz"
            ),
            script=SCRIPT,
            scripts={
                Platform.AARCH64_DARWIN: DARWIN_SCRIPT,
                Platform.X86_64_DARWIN: DARWIN_SCRIPT,
            },
        ),
    )
