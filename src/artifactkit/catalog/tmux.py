from __future__ import annotations

import textwrap

from artifactkit.catalog import libevent, ncurses
from artifactkit.recipe import RecipeSpec, Slot

NAME = "tmux"
VERSION = "3.5a"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/tmux-{{version}}

    export CPPFLAGS="-I{{libevent}}/include -I{{ncurses}}/include -I{{ncurses}}/include/ncursesw"
    export LDFLAGS="-L{{libevent}}/lib -L{{ncurses}}/lib -Wl,-rpath,{{libevent}}/lib -Wl,-rpath,{{ncurses}}/lib"

    ./configure --disable-utf8proc --prefix="$ARTIFACT_OUTPUT"

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/tmux/tmux/releases/download/{VERSION}/tmux-{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(
            Slot("libevent", libevent.recipe()),
            Slot("ncurses", ncurses.recipe()),
        ),
    )
