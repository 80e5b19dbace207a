"""Rust toolchain laid out the way rustup expects under ``RUSTUP_HOME``."""

from __future__ import annotations

import textwrap

from artifactkit.models import Platform
from artifactkit.platforms import RUST_TARGETS, by_platform, rust_target
from artifactkit.recipe import RecipeSpec

NAME = "rust-toolchain"
VERSION = "1.89.0"

SCRIPT = textwrap.dedent("""\
    TOOLCHAIN_DIR="$ARTIFACT_OUTPUT/toolchains/{{version}}-{{system}}"
    mkdir -pv "$TOOLCHAIN_DIR"
    pushd ./source/{{name}}/rust-{{version}}-{{system}}
    ./install.sh \\
        --prefix="$TOOLCHAIN_DIR" \\
        --components=cargo,clippy-preview,rust-analyzer-preview,rust-std-{{system}},rustc,rustfmt-preview \\
        --disable-ldconfig
""")


def toolchain_name(platform: Platform | str) -> str:
    """Directory name of the toolchain under ``toolchains/``."""
    return f"{VERSION}-{rust_target(platform)}"


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=RUST_TARGETS,
            source=f"https://static.rust-lang.org/dist/rust-{VERSION}-{{system}}.tar.gz",
            script=SCRIPT,
        ),
    )
