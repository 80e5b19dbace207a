from __future__ import annotations

from artifactkit.catalog import go
from artifactkit.recipe import RecipeSpec, Slot

NAME = "skopeo"
VERSION = "1.21.0"

SCRIPT = go.build_script(
    "./cmd/skopeo",
    flags="-tags containers_image_openpgp,exclude_graphdriver_btrfs",
)


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/containers/skopeo/archive/refs/tags/v{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(Slot("go", go.recipe()),),
    )
