from __future__ import annotations

import textwrap

from artifactkit.catalog import ncurses
from artifactkit.recipe import RecipeSpec, Slot

NAME = "readline"
VERSION = "8.2"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/{{name}}-{{version}}

    export CPPFLAGS="-I{{ncurses}}/include -I{{ncurses}}/include/ncursesw"
    export LDFLAGS="-L{{ncurses}}/lib -Wl,-rpath,{{ncurses}}/lib"

    ./configure \\
        --prefix="$ARTIFACT_OUTPUT" \\
        --with-curses

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://ftpmirror.gnu.org/readline/readline-{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(Slot("ncurses", ncurses.recipe()),),
    )
