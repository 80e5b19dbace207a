from __future__ import annotations

import textwrap

from artifactkit.catalog import libgpg_error
from artifactkit.recipe import RecipeSpec, Slot

NAME = "libassuan"
VERSION = "3.0.2"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/libassuan-{{version}}

    export PATH="{{libgpg_error}}/bin:$PATH"
    export CPPFLAGS="-I{{libgpg_error}}/include"
    export LDFLAGS="-L{{libgpg_error}}/lib -Wl,-rpath,{{libgpg_error}}/lib"

    ./configure --prefix="$ARTIFACT_OUTPUT" --with-libgpg-error-prefix={{libgpg_error}}

    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://gnupg.org/ftp/gcrypt/libassuan/libassuan-{VERSION}.tar.bz2",
        script=SCRIPT,
        slots=(Slot("libgpg_error", libgpg_error.recipe()),),
    )
