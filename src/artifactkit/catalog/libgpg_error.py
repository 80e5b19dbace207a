from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "libgpg-error"
VERSION = "1.56"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/libgpg-error-{{version}}

    ./configure --prefix="$ARTIFACT_OUTPUT"

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://gnupg.org/ftp/gcrypt/libgpg-error/libgpg-error-{VERSION}.tar.bz2",
        script=SCRIPT,
    )
