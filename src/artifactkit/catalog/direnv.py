from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "direnv"
VERSION = "v2.37.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "darwin-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

# Fetched by the step itself; the recipe has no source.
SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    curl -L "https://github.com/direnv/direnv/releases/download/{{version}}/direnv.{{system}}" -o "$ARTIFACT_OUTPUT/bin/direnv"
    chmod +x "$ARTIFACT_OUTPUT/bin/direnv"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(tokens=SYSTEMS, script=SCRIPT),
    )
