from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "libevent"
VERSION = "2.1.12"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/{{name}}-{{version}}-stable
    ./configure \\
        --disable-openssl \\
        --enable-shared \\
        --prefix="$ARTIFACT_OUTPUT"
    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=(
            "https://github.com/libevent/libevent/releases/download/"
            f"release-{VERSION}-stable/libevent-{VERSION}-stable.tar.gz"
        ),
        script=SCRIPT,
    )
