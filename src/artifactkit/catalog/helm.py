from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "helm"
VERSION = "4.0.4"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "darwin-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}/{{system}}
    cp helm "$ARTIFACT_OUTPUT/bin/helm"
    chmod +x "$ARTIFACT_OUTPUT/bin/helm"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://get.helm.sh/helm-v{VERSION}-{{system}}.tar.gz",
            script=SCRIPT,
        ),
    )
