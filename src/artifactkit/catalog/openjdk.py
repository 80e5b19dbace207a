from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "openjdk"
VERSION = "25.0.1"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "macos-aarch64",
    Platform.AARCH64_LINUX: "linux-aarch64",
    Platform.X86_64_DARWIN: "macos-x64",
    Platform.X86_64_LINUX: "linux-x64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/jdk-{{version}}
    cp -Rv * "$ARTIFACT_OUTPUT/."
""")

# macOS archives wrap the JDK in a bundle directory.
DARWIN_SCRIPT = SCRIPT.replace("jdk-{{version}}", "jdk-{{version}}.jdk")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=(
                "https://download.java.net/java/GA/jdk25.0.1/2fbf10d8c78e40bd87641c434705079d/8/GPL/"
                f"openjdk-{VERSION}_{{system}}_bin.tar.gz"
            ),
            script=SCRIPT,
            scripts={
                Platform.AARCH64_DARWIN: DARWIN_SCRIPT,
                Platform.X86_64_DARWIN: DARWIN_SCRIPT,
            },
        ),
    )
