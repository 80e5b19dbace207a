"""Project development environment."""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from artifactkit.catalog import protoc, rust_toolchain
from artifactkit.models import DEFAULT_PLATFORMS, Platform
from artifactkit.platforms import RUST_TARGETS, by_platform, coerce_platform
from artifactkit.recipe import RecipeSpec, Slot

ENVIRONMENT_VERSION = "latest"

_TOOLCHAIN = rust_toolchain.VERSION + "-{{system}}"
_PATH = "{{protoc}}/bin:{{rust_toolchain}}/toolchains/" + _TOOLCHAIN + "/bin"

ENVIRONMENTS = (
    "PATH=" + _PATH + ":$PATH",
    "RUSTUP_HOME={{rust_toolchain}}",
    "RUSTUP_TOOLCHAIN=" + _TOOLCHAIN,
)

# Writes an activation script with the toolchain locations baked in.
SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT/bin"
    cat > "$ARTIFACT_OUTPUT/bin/activate" << EOF
    export PATH="{path}:\\$PATH"
    export RUSTUP_HOME="{{{{rust_toolchain}}}}"
    export RUSTUP_TOOLCHAIN="{toolchain}"
    EOF
""").format(path=_PATH, toolchain=_TOOLCHAIN)


def dev_environment(
    name: str = "dev",
    platforms: Iterable[Platform | str] = DEFAULT_PLATFORMS,
) -> RecipeSpec:
    """Environment artifact that pins ``protoc`` and the Rust toolchain."""
    selected = {coerce_platform(platform) for platform in platforms}
    tokens = {platform: target for platform, target in RUST_TARGETS.items() if platform in selected}
    return RecipeSpec(
        name=name,
        version=ENVIRONMENT_VERSION,
        variants=by_platform(tokens=tokens, script=SCRIPT, environments=ENVIRONMENTS),
        slots=(
            Slot("protoc", protoc.recipe()),
            Slot("rust_toolchain", rust_toolchain.recipe()),
        ),
    )


__all__ = ["ENVIRONMENTS", "dev_environment"]
