"""libuv as a static library; only macOS hosts need it."""

from __future__ import annotations

import textwrap

from artifactkit.catalog import cmake
from artifactkit.models import Platform
from artifactkit.recipe import RecipeSpec, Slot

NAME = "libuv"
VERSION = "1.52.0"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    BUILD_DIR="$(pwd)/build"
    mkdir -p "$BUILD_DIR"

    pushd "$BUILD_DIR"
    {{cmake}}/bin/cmake \\
        -DCMAKE_BUILD_TYPE=RELEASE \\
        -DCMAKE_INSTALL_PREFIX="$ARTIFACT_OUTPUT" \\
        -DCMAKE_C_FLAGS="-fPIC" \\
        -DBUILD_TESTING=OFF \\
        -DLIBUV_BUILD_SHARED=OFF \\
        "$(pwd)/../source/{{name}}/{{name}}-{{version}}"
    make -j$(sysctl -n hw.ncpu) install
    popd
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/libuv/libuv/archive/refs/tags/v{VERSION}.tar.gz",
        script=SCRIPT,
        platforms=(Platform.AARCH64_DARWIN, Platform.X86_64_DARWIN),
        slots=(Slot("cmake", cmake.recipe()),),
    )
