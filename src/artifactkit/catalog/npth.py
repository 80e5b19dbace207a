from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "npth"
VERSION = "1.8"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/npth-{{version}}

    ./configure --prefix="$ARTIFACT_OUTPUT"

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://gnupg.org/ftp/gcrypt/npth/npth-{VERSION}.tar.bz2",
        script=SCRIPT,
    )
