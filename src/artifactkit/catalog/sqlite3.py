from __future__ import annotations

import textwrap

from artifactkit.recipe import RecipeSpec

NAME = "sqlite3"
VERSION = "3.51.2"

# sqlite.org publishes under the release year with a zero-padded version tag.
RELEASE_YEAR = "2026"
VERSION_TAG = "3510200"

SCRIPT = textwrap.dedent(f"""\
    mkdir -pv "$ARTIFACT_OUTPUT"
    pushd ./source/{{{{name}}}}/sqlite-autoconf-{VERSION_TAG}
    ./configure --prefix="$ARTIFACT_OUTPUT"
    make
    make install
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://www.sqlite.org/{RELEASE_YEAR}/sqlite-autoconf-{VERSION_TAG}.tar.gz",
        script=SCRIPT,
    )
