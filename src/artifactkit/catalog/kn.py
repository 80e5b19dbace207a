from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "kn"
VERSION = "1.19.0"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "darwin-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp ./source/{{name}}/kn-{{system}} "$ARTIFACT_OUTPUT/bin/kn"
    chmod +x "$ARTIFACT_OUTPUT/bin/kn"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/knative/client/releases/download/knative-v{VERSION}/"
                f"kn-{{system}}"
            ),
            script=SCRIPT,
        ),
    )
