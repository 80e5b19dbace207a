from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "kubectl"
VERSION = "1.34.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin/arm64",
    Platform.AARCH64_LINUX: "linux/arm64",
    Platform.X86_64_DARWIN: "darwin/amd64",
    Platform.X86_64_LINUX: "linux/amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp ./source/{{name}}/kubectl "$ARTIFACT_OUTPUT/bin/kubectl"
    chmod +x "$ARTIFACT_OUTPUT/bin/kubectl"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://dl.k8s.io/release/v{VERSION}/bin/{{system}}/kubectl",
            script=SCRIPT,
        ),
    )
