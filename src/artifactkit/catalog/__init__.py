"""Recipe catalog: one module per artifact.

Each module exposes ``NAME``, ``VERSION`` and a ``recipe()`` factory. Module
file names are artifact names with ``-`` spelled ``_``.
"""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType

from artifactkit.errors import ValidationError
from artifactkit.recipe import RecipeSpec

from . import (
    argocd,
    awscli2,
    bat,
    bottom,
    cmake,
    crane,
    cue,
    direnv,
    doppler,
    fd,
    ffmpeg,
    fluxcd,
    glow,
    go,
    golangci_lint,
    gpg,
    helm,
    jj,
    jq,
    json_c,
    just,
    k9s,
    kn,
    kubectl,
    kubeseal,
    lazygit,
    libassuan,
    libevent,
    libgcrypt,
    libgpg_error,
    libksba,
    libuv,
    libwebsockets,
    lima,
    linux_slim,
    mbedtls,
    ncurses,
    neovim,
    nginx,
    nnn,
    npth,
    openapi_generator_cli,
    openjdk,
    pkg_config,
    protoc,
    readline,
    ripgrep,
    rust_toolchain,
    skopeo,
    sqlite3,
    starship,
    terraform,
    tmux,
    ttyd,
    umoci,
    vhs,
    yq,
    zlib,
    zsh,
)

_MODULES: tuple[ModuleType, ...] = (
    argocd,
    awscli2,
    bat,
    bottom,
    cmake,
    crane,
    cue,
    direnv,
    doppler,
    fd,
    ffmpeg,
    fluxcd,
    glow,
    go,
    golangci_lint,
    gpg,
    helm,
    jj,
    jq,
    json_c,
    just,
    k9s,
    kn,
    kubectl,
    kubeseal,
    lazygit,
    libassuan,
    libevent,
    libgcrypt,
    libgpg_error,
    libksba,
    libuv,
    libwebsockets,
    lima,
    linux_slim,
    mbedtls,
    ncurses,
    neovim,
    nginx,
    nnn,
    npth,
    openapi_generator_cli,
    openjdk,
    pkg_config,
    protoc,
    readline,
    ripgrep,
    rust_toolchain,
    skopeo,
    sqlite3,
    starship,
    terraform,
    tmux,
    ttyd,
    umoci,
    vhs,
    yq,
    zlib,
    zsh,
)

CATALOG: dict[str, Callable[[], RecipeSpec]] = {
    module.NAME: module.recipe for module in sorted(_MODULES, key=lambda m: m.NAME)
}

VERSIONS: dict[str, str] = {module.NAME: module.VERSION for module in _MODULES}


def get_recipe(name: str) -> RecipeSpec:
    factory = CATALOG.get(name)
    if factory is None:
        raise ValidationError(
            f"Unknown artifact '{name}'.",
            hint="Run `artifactkit list` to see the catalog.",
            context={"artifact": name},
        )
    return factory()


def catalog_names() -> tuple[str, ...]:
    return tuple(CATALOG)


__all__ = ["CATALOG", "VERSIONS", "catalog_names", "get_recipe"]
