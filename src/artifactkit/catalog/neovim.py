from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec

NAME = "neovim"
VERSION = "0.11.5"

SYSTEMS = {
    Platform.AARCH64_DARWIN: "macos-arm64",
    Platform.AARCH64_LINUX: "linux-arm64",
    Platform.X86_64_DARWIN: "macos-x86_64",
    Platform.X86_64_LINUX: "linux-x86_64",
}

# The release tree already has the bin/lib/share layout.
SCRIPT = textwrap.dedent("""\
    pushd ./source/{{name}}/nvim-{{system}}
    cp -Rv * "$ARTIFACT_OUTPUT/."
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=SYSTEMS,
            source=f"https://github.com/neovim/neovim/releases/download/v{VERSION}/nvim-{{system}}.tar.gz",
            script=SCRIPT,
        ),
    )
