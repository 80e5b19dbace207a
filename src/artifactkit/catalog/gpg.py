"""GnuPG, built against the shared libgpg-error family of libraries."""

from __future__ import annotations

import textwrap

from artifactkit.catalog import libassuan, libgcrypt, libgpg_error, libksba, npth
from artifactkit.recipe import RecipeSpec, Slot

NAME = "gpg"
VERSION = "2.5.16"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    pushd ./source/{{name}}/gnupg-{{version}}

    export PATH="{{libgpg_error}}/bin:{{npth}}/bin:{{libgcrypt}}/bin:{{libassuan}}/bin:{{libksba}}/bin:$PATH"
    export PKG_CONFIG_PATH="{{libgpg_error}}/lib/pkgconfig:{{npth}}/lib/pkgconfig:{{libgcrypt}}/lib/pkgconfig:{{libassuan}}/lib/pkgconfig:{{libksba}}/lib/pkgconfig"
    export CPPFLAGS="-I{{libgpg_error}}/include -I{{npth}}/include -I{{libgcrypt}}/include -I{{libassuan}}/include -I{{libksba}}/include"
    export LDFLAGS="-L{{libgpg_error}}/lib -L{{npth}}/lib -L{{libgcrypt}}/lib -L{{libassuan}}/lib -L{{libksba}}/lib \\
        -Wl,-rpath,{{libgpg_error}}/lib -Wl,-rpath,{{npth}}/lib -Wl,-rpath,{{libgcrypt}}/lib \\
        -Wl,-rpath,{{libassuan}}/lib -Wl,-rpath,{{libksba}}/lib"

    ./configure \\
        --prefix="$ARTIFACT_OUTPUT" \\
        --with-libgpg-error-prefix={{libgpg_error}} \\
        --with-npth-prefix={{npth}} \\
        --with-libgcrypt-prefix={{libgcrypt}} \\
        --with-libassuan-prefix={{libassuan}} \\
        --with-ksba-prefix={{libksba}} \\
        --disable-doc

    make
    make install
""")


def recipe() -> RecipeSpec:
    shared = {"libgpg_error": "libgpg_error"}
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://gnupg.org/ftp/gcrypt/gnupg/gnupg-{VERSION}.tar.bz2",
        script=SCRIPT,
        slots=(
            Slot("libgpg_error", libgpg_error.recipe()),
            Slot("libassuan", libassuan.recipe(), inputs=shared),
            Slot("libgcrypt", libgcrypt.recipe(), inputs=shared),
            Slot("libksba", libksba.recipe(), inputs=shared),
            Slot("npth", npth.recipe()),
        ),
    )
