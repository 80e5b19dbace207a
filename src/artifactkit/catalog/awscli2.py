from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "awscli2"
VERSION = "2.33.1"

# Linux ships zip installers per architecture; macOS a universal pkg.
SYSTEMS = {
    Platform.AARCH64_DARWIN: f"AWSCLIV2-{VERSION}.pkg",
    Platform.AARCH64_LINUX: f"awscli-exe-linux-aarch64-{VERSION}.zip",
    Platform.X86_64_DARWIN: f"AWSCLIV2-{VERSION}.pkg",
    Platform.X86_64_LINUX: f"awscli-exe-linux-x86_64-{VERSION}.zip",
}

LINUX_SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}
    chmod +x ./aws/install
    ./aws/install --install-dir "$ARTIFACT_OUTPUT" --bin-dir "$ARTIFACT_OUTPUT/bin"
""")

DARWIN_SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    pkgutil --expand-full {{system}} extracted
    cp -Rv extracted/aws-cli.pkg/Payload/aws-cli/* "$ARTIFACT_OUTPUT/."

    test -f "$ARTIFACT_OUTPUT/aws" || (echo 'ERROR: aws executable not found after extraction' && exit 1)
    test -f "$ARTIFACT_OUTPUT/aws_completer" || (echo 'ERROR: aws_completer not found after extraction' && exit 1)

    ln -sf "$ARTIFACT_OUTPUT/aws" "$ARTIFACT_OUTPUT/bin/aws"
    ln -sf "$ARTIFACT_OUTPUT/aws_completer" "$ARTIFACT_OUTPUT/bin/aws_completer"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source="https://awscli.amazonaws.com/{system}",
            script=LINUX_SCRIPT,
            scripts={
                Platform.AARCH64_DARWIN: DARWIN_SCRIPT,
                Platform.X86_64_DARWIN: DARWIN_SCRIPT,
            },
        ),
    )
