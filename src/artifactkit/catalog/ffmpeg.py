from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "ffmpeg"
VERSION = "7.1.3"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/ffmpeg-{{version}}
    ./configure \\
        --prefix="$ARTIFACT_OUTPUT" \\
        --disable-doc \\
        --disable-debug \\
        --enable-gpl
    make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu)
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://ffmpeg.org/releases/ffmpeg-{VERSION}.tar.xz",
        script=SCRIPT,
    )
