"""Static libwebsockets over libuv and mbedtls.

Both libuv and mbedtls only build on macOS hosts, so resolving this recipe on
Linux fails with their unsupported-platform error.
"""

from __future__ import annotations

import textwrap

from artifactkit.catalog import cmake, libuv, mbedtls, zlib
from artifactkit.recipe import RecipeSpec, Slot

NAME = "libwebsockets"
VERSION = "4.5.2"

SCRIPT = textwrap.dedent("""\
    mkdir -pv "$ARTIFACT_OUTPUT"

    LWS_SRC="$(pwd)/source/{{name}}/{{name}}-{{version}}"
    sed 's/ websockets_shared//g' "$LWS_SRC/cmake/libwebsockets-config.cmake.in" > "$LWS_SRC/cmake/libwebsockets-config.cmake.in.tmp"
    mv "$LWS_SRC/cmake/libwebsockets-config.cmake.in.tmp" "$LWS_SRC/cmake/libwebsockets-config.cmake.in"

    BUILD_DIR="$(pwd)/build"
    mkdir -p "$BUILD_DIR"

    pushd "$BUILD_DIR"
    {{cmake}}/bin/cmake \\
        -DCMAKE_BUILD_TYPE=RELEASE \\
        -DCMAKE_INSTALL_PREFIX="$ARTIFACT_OUTPUT" \\
        -DCMAKE_FIND_LIBRARY_SUFFIXES=".a" \\
        -DCMAKE_PREFIX_PATH="{{zlib}};{{libuv}};{{mbedtls}}" \\
        -DLWS_WITHOUT_TESTAPPS=ON \\
        -DLWS_WITH_MBEDTLS=ON \\
        -DLWS_WITH_LIBUV=ON \\
        -DLWS_STATIC_PIC=ON \\
        -DLWS_WITH_SHARED=OFF \\
        -DLWS_UNIX_SOCK=ON \\
        -DLWS_IPV6=ON \\
        -DLWS_ROLE_RAW_FILE=OFF \\
        -DLWS_WITH_HTTP2=ON \\
        -DLWS_WITH_HTTP_BASIC_AUTH=OFF \\
        -DLWS_WITH_UDP=OFF \\
        -DLWS_WITHOUT_CLIENT=ON \\
        -DLWS_WITHOUT_EXTENSIONS=OFF \\
        -DLWS_WITH_LEJP=OFF \\
        -DLWS_WITH_LEJP_CONF=OFF \\
        -DLWS_WITH_LWSAC=OFF \\
        -DLWS_WITH_SEQUENCER=OFF \\
        -DLWS_WITH_SYS_FAULT_INJECTION=OFF \\
        -DLWS_WITH_SYS_METRICS=OFF \\
        -DLWS_WITH_DLO=OFF \\
        "$LWS_SRC"
    make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu) install
    popd
""")


def recipe() -> RecipeSpec:
    return RecipeSpec.portable(
        NAME,
        VERSION,
        source=f"https://github.com/warmcat/libwebsockets/archive/refs/tags/v{VERSION}.tar.gz",
        script=SCRIPT,
        slots=(
            Slot("cmake", cmake.recipe()),
            Slot("zlib", zlib.recipe()),
            Slot("libuv", libuv.recipe(), inputs={"cmake": "cmake"}),
            Slot("mbedtls", mbedtls.recipe(), inputs={"cmake": "cmake"}),
        ),
    )
