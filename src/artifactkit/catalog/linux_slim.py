"""Slim Linux image helper, packaged from the repository's own script."""

from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "linux-slim"
VERSION = "latest"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    pushd ./source/{{name}}
    cp script/linux-slim.sh "$ARTIFACT_OUTPUT/bin/linux-slim"
    chmod +x "$ARTIFACT_OUTPUT/bin/linux-slim"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=".",
        script=SCRIPT,
        includes=("script/linux-slim.sh",),
    )
