from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "jq"
VERSION = "1.8.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "macos-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "macos-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cp ./source/{{name}}/jq-{{system}} "$ARTIFACT_OUTPUT/bin/jq"
    chmod +x "$ARTIFACT_OUTPUT/bin/jq"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://github.com/jqlang/jq/releases/download/jq-{VERSION}/jq-{{system}}",
            script=SCRIPT,
        ),
    )
