from __future__ import annotations

import textwrap

from artifactkit.catalog import ncurses, pkg_config, readline
from artifactkit.recipe import RecipeSpec, Slot

NAME = "nnn"
VERSION = "5.1"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/nnn-{{version}}

    export PATH="{{pkg_config}}/bin:$PATH"
    export CPPFLAGS="-I{{ncurses}}/include -I{{ncurses}}/include/ncursesw -I{{readline}}/include"
    export LDFLAGS="-L{{ncurses}}/lib -L{{readline}}/lib -Wl,-rpath,{{ncurses}}/lib -Wl,-rpath,{{readline}}/lib"
    export PKG_CONFIG_PATH="{{ncurses}}/lib/pkgconfig:{{readline}}/lib/pkgconfig"

    make PREFIX="$ARTIFACT_OUTPUT"
    make PREFIX="$ARTIFACT_OUTPUT" install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/jarun/nnn/archive/refs/tags/v{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(
            Slot("ncurses", ncurses.recipe()),
            Slot("pkg_config", pkg_config.recipe()),
            Slot("readline", readline.recipe(), inputs={"ncurses": "ncurses"}),
        ),
    )
