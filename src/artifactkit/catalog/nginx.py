from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "nginx"
VERSION = "1.28.0"

# Modules needing pcre or zlib are disabled so the build has no prerequisites.
SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{name}}/nginx-{{version}}
    ./configure \\
        --prefix="$ARTIFACT_OUTPUT" \\
        --without-http_gzip_module \\
        --without-http_rewrite_module
    make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu)
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://nginx.org/download/nginx-{VERSION}.tar.gz",
        script=SCRIPT,
    )
