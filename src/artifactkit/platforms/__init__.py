"""Platform selection for recipes.

Every table in this module is keyed by the closed :class:`Platform`
enumeration, so adding a platform means touching one enum and the tables
that must explicitly handle (or reject) it.
"""

from __future__ import annotations

import platform as host
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from artifactkit.errors import UnsupportedPlatform, ValidationError
from artifactkit.models import DEFAULT_PLATFORMS, Platform, PlatformVariant

if TYPE_CHECKING:
    from artifactkit.recipe import RecipeSpec

_MACHINE_ALIASES: dict[str, str] = {
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "amd64": "x86_64",
    "x86_64": "x86_64",
}

RUST_TARGETS: dict[Platform, str] = {
    Platform.AARCH64_DARWIN: "aarch64-apple-darwin",
    Platform.AARCH64_LINUX: "aarch64-unknown-linux-gnu",
    Platform.X86_64_DARWIN: "x86_64-apple-darwin",
    Platform.X86_64_LINUX: "x86_64-unknown-linux-gnu",
}


def coerce_platform(value: Platform | str) -> Platform:
    """Return *value* as a :class:`Platform`, rejecting unknown identifiers."""
    if isinstance(value, Platform):
        return value
    try:
        return Platform(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown platform '{value}'.",
            hint="Use one of: " + ", ".join(p.value for p in DEFAULT_PLATFORMS),
            context={"platform": str(value)},
        ) from exc


def select_variant(recipe: RecipeSpec, platform: Platform | str) -> PlatformVariant:
    """Return the variant authored for *platform* on *recipe*.

    Only the entry for *platform* is consulted. A missing entry raises
    :class:`UnsupportedPlatform`.
    """
    selected = coerce_platform(platform)
    variant = recipe.variants.get(selected)
    if variant is None:
        raise UnsupportedPlatform(
            recipe.name,
            selected.value,
            supported=tuple(p.value for p in recipe.platforms),
        )
    return variant


def host_platform(*, machine: str | None = None, system: str | None = None) -> Platform:
    """Detect the platform of the running host."""
    raw_machine = (machine if machine is not None else host.machine()).lower()
    raw_system = (system if system is not None else host.system()).lower()
    arch = _MACHINE_ALIASES.get(raw_machine)
    if arch is None or raw_system not in ("darwin", "linux"):
        raise ValidationError(
            "Host platform is not supported.",
            hint="Pass an explicit platform instead of detecting it from the host.",
            context={"machine": raw_machine, "system": raw_system},
        )
    return Platform(f"{arch}-{raw_system}")


def rust_target(platform: Platform | str) -> str:
    return RUST_TARGETS[coerce_platform(platform)]


def by_platform(
    *,
    tokens: Mapping[Platform, str],
    script: str,
    source: str | None = None,
    scripts: Mapping[Platform, str] | None = None,
    environments: Sequence[str] = (),
) -> dict[Platform, PlatformVariant]:
    """Build a variant mapping from a per-platform token table.

    ``{system}`` in *source* is formatted with the platform's token, and the
    ``{{system}}`` placeholder in the script and in *environments* is
    replaced with it. Platforms missing from *tokens* stay unsupported.
    *scripts* overrides the script for individual platforms.
    """
    variants: dict[Platform, PlatformVariant] = {}
    for selected in DEFAULT_PLATFORMS:
        token = tokens.get(selected)
        if token is None:
            continue
        template = (scripts or {}).get(selected, script)
        variants[selected] = PlatformVariant(
            source=None if source is None else source.format(system=token),
            script=template.replace("{{system}}", token),
            environments=tuple(entry.replace("{{system}}", token) for entry in environments),
        )
    return variants


__all__ = [
    "RUST_TARGETS",
    "by_platform",
    "coerce_platform",
    "host_platform",
    "rust_target",
    "select_variant",
]
