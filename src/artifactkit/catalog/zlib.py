from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "zlib"
VERSION = "1.3.2"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/{{name}}-{{version}}
    ./configure --static --prefix="$ARTIFACT_OUTPUT"
    make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu) install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://zlib.net/zlib-{VERSION}.tar.gz",
        script=SCRIPT,
    )
