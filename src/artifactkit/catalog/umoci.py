from __future__ import annotations

from artifactkit.catalog import go
from artifactkit.recipe import RecipeSpec, Slot

NAME = "umoci"
VERSION = "0.6.0"

SCRIPT = go.build_script("./cmd/umoci")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/opencontainers/umoci/archive/refs/tags/v{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(Slot("go", go.recipe()),),
    )
