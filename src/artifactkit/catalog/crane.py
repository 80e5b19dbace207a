"""crane ships inside the go-containerregistry release archive."""

from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "crane"
VERSION = "0.20.6"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "Darwin_arm64",
    Platform.AARCH64_LINUX: "Linux_arm64",
    Platform.X86_64_DARWIN: "Darwin_x86_64",
    Platform.X86_64_LINUX: "Linux_x86_64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp crane "$ARTIFACT_OUTPUT/bin/crane"
    chmod +x "$ARTIFACT_OUTPUT/bin/crane"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/google/go-containerregistry/releases/download/v{VERSION}/"
                f"go-containerregistry_{{system}}.tar.gz"
            ),
            script=SCRIPT,
        ),
    )
