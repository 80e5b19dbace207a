from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "protoc"
VERSION = "25.4"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "osx-aarch_64",
    Platform.AARCH64_LINUX: "linux-aarch_64",
    Platform.X86_64_DARWIN: "osx-x86_64",
    Platform.X86_64_LINUX: "linux-x86_64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp bin/protoc "$ARTIFACT_OUTPUT/bin/protoc"
    cp -r include "$ARTIFACT_OUTPUT/include"
    chmod +x "$ARTIFACT_OUTPUT/bin/protoc"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                f"https://github.com/protocolbuffers/protobuf/releases/download/v{VERSION}/"
                f"protoc-{VERSION}-{{system}}.zip"
            ),
            script=SCRIPT,
        ),
    )
