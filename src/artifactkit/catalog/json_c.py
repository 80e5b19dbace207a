"""json-c as a static library; only macOS hosts need it."""

from __future__ import annotations

import textwrap

from artifactkit.catalog import cmake
from artifactkit.models import Platform
from artifactkit.recipe import RecipeSpec, Slot

NAME = "json-c"
VERSION = "0.18"
TAG = "json-c-0.18-20240915"

SCRIPT = textwrap.dedent(f"""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    BUILD_DIR="$(pwd)/build"
    mkdir -p "$BUILD_DIR"

    pushd "$BUILD_DIR"

    {{{{cmake}}}}/bin/cmake \\
        -DCMAKE_BUILD_TYPE=RELEASE \\
        -DCMAKE_INSTALL_PREFIX="$ARTIFACT_OUTPUT" \\
        -DCMAKE_POLICY_VERSION_MINIMUM=3.5 \\
        -DBUILD_SHARED_LIBS=OFF \\
        -DBUILD_TESTING=OFF \\
        -DDISABLE_THREAD_LOCAL_STORAGE=ON \\
        "$(pwd)/../source/{{{{name}}}}/json-c-{TAG}"

    make -j$(sysctl -n hw.ncpu) install
    popd
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/json-c/json-c/archive/refs/tags/{TAG}.tar.gz",
        script=SCRIPT,
        platforms=(Platform.AARCH64_DARWIN, Platform.X86_64_DARWIN),
        slots=(Slot("cmake", cmake.recipe()),),
    )
