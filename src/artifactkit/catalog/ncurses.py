from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "ncurses"
VERSION = "6.5"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/{{name}}-{{version}}
    ./configure \\
        --enable-pc-files \\
        --prefix="$ARTIFACT_OUTPUT" \\
        --with-pkg-config-libdir="$ARTIFACT_OUTPUT/lib/pkgconfig" \\
        --with-shared \\
        --with-termlib
    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://invisible-island.net/archives/ncurses/ncurses-{VERSION}.tar.gz",
        script=SCRIPT,
    )
