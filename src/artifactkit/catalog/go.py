"""Go toolchain, plus the shared build step for tools compiled from Go sources."""

from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "go"
VERSION = "1.25.4"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "darwin-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "darwin-amd64",
    Platform.X86_64_LINUX: "linux-amd64",
}

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    cp -R ./source/{{name}}/go/. "$ARTIFACT_OUTPUT/"
""")


def build_script(package: str, *, flags: str = "") -> str:
    """Script compiling *package* from the unpacked ``<name>-<version>`` tree.

    The consuming recipe must bind the toolchain to a slot named ``go``.
    """
    build = "{{go}}/bin/go build"
    if flags:
        build += f" {flags}"
    return textwrap.dedent(f"""\
        mkdir -pv "$ARTIFACT_OUTPUT/bin"
        pushd ./source/{{{{name}}}}/{{{{name}}}}-{{{{version}}}}
        export CGO_ENABLED=0
        export GOCACHE="$(pwd)/.cache/go-build"
        export GOPATH="$(pwd)/.cache/go"
        {build} -o "$ARTIFACT_OUTPUT/bin/{{{{name}}}}" {package}
    """)


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://go.dev/dl/go{VERSION}.{{system}}.tar.gz",
            script=SCRIPT,
        ),
    )
