from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "k9s"
VERSION = "0.50.18"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "Darwin_arm64",
    Platform.AARCH64_LINUX: "Linux_arm64",
    Platform.X86_64_DARWIN: "Darwin_amd64",
    Platform.X86_64_LINUX: "Linux_amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp k9s "$ARTIFACT_OUTPUT/bin/k9s"
    chmod +x "$ARTIFACT_OUTPUT/bin/k9s"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://github.com/derailed/k9s/releases/download/v{VERSION}/k9s_{{system}}.tar.gz",
            script=SCRIPT,
        ),
    )
