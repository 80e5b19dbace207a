from __future__ import annotations

import textwrap

from artifactkit.catalog import ncurses
from artifactkit.recipe import RecipeSpec, Slot

NAME = "zsh"
VERSION = "5.9"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/zsh-{{version}}

    export CFLAGS="-Wno-incompatible-pointer-types"
    export CPPFLAGS="-I{{ncurses}}/include -I{{ncurses}}/include/ncursesw"
    export LDFLAGS="-L{{ncurses}}/lib -Wl,-rpath,{{ncurses}}/lib"

    ./configure --prefix="$ARTIFACT_OUTPUT"

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://downloads.sourceforge.net/project/zsh/zsh/{VERSION}/zsh-{VERSION}.tar.xz",
        script=SCRIPT,
        slots=(Slot("ncurses", ncurses.recipe()),),
    )
