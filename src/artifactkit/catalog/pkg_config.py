from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "pkg-config"
VERSION = "0.29.2"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"

    pushd ./source/{{name}}/pkg-config-{{version}}

    CFLAGS="-Wno-error=int-conversion" ./configure --prefix="$ARTIFACT_OUTPUT" --with-internal-glib

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://pkgconfig.freedesktop.org/releases/pkg-config-{VERSION}.tar.gz",
        script=SCRIPT,
    )
