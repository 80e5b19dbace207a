"""Static mbedtls; only macOS hosts need it."""

from __future__ import annotations

import textwrap

from artifactkit.catalog import cmake
from artifactkit.models import Platform
from artifactkit.recipe import RecipeSpec, Slot

NAME = "mbedtls"
VERSION = "3.6.5"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    BUILD_DIR="$(pwd)/build"
    mkdir -p "$BUILD_DIR"

    pushd "$BUILD_DIR"
    {{cmake}}/bin/cmake \\
        -DCMAKE_BUILD_TYPE=RELEASE \\
        -DCMAKE_INSTALL_PREFIX="$ARTIFACT_OUTPUT" \\
        -DENABLE_TESTING=OFF \\
        -DUSE_SHARED_MBEDTLS_LIBRARY=OFF \\
        "$(pwd)/../source/{{name}}/{{name}}-{{version}}"
    make -j$(sysctl -n hw.ncpu) install
    popd
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=(
            f"https://github.com/Mbed-TLS/mbedtls/releases/download/mbedtls-{VERSION}/"
            f"mbedtls-{VERSION}.tar.bz2"
        ),
        script=SCRIPT,
        platforms=(Platform.AARCH64_DARWIN, Platform.X86_64_DARWIN),
        slots=(Slot("cmake", cmake.recipe()),),
    )
