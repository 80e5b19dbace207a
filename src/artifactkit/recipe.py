"""Recipe declarations: identity, dependency slots, and per-platform variants.

A recipe script is plain shell text with ``{{placeholder}}`` tokens. The
tokens ``{{name}}`` and ``{{version}}`` resolve to the recipe identity; every
other token must name one of the recipe's dependency slots and resolves to
the bound artifact's environment key.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

from artifactkit.errors import ValidationError
from artifactkit.models import DEFAULT_PLATFORMS, ArtifactRef, Platform, PlatformVariant
from artifactkit.platforms import coerce_platform

PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
IDENTITY_KEYS = frozenset({"name", "version"})
_SLOT_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True, slots=True)
class Slot:
    """A named prerequisite of a recipe.

    ``inputs`` maps slots of the *default* recipe to earlier sibling slots of
    the owning recipe, so the default build reuses what the owner already
    resolved.
    """

    name: str
    default: RecipeSpec
    override: ArtifactRef | None = None
    inputs: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RecipeSpec:
    name: str
    version: str
    variants: Mapping[Platform, PlatformVariant]
    slots: tuple[Slot, ...] = ()
    environments: tuple[str, ...] = ()
    includes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Recipes require a non-empty name.")
        if not self.version:
            raise ValidationError(
                "Recipes require a non-empty version.",
                context={"recipe": self.name},
            )
        if not self.variants:
            raise ValidationError(
                "Recipes require at least one platform variant.",
                hint="Declare variants for every platform the recipe is meant to build on.",
                context={"recipe": self.name},
            )
        variants = {coerce_platform(key): value for key, value in self.variants.items()}
        object.__setattr__(self, "variants", variants)
        object.__setattr__(self, "slots", tuple(self.slots))
        object.__setattr__(self, "environments", tuple(self.environments))
        object.__setattr__(self, "includes", tuple(self.includes))
        self._validate_slots()
        self._validate_templates()

    @property
    def platforms(self) -> tuple[Platform, ...]:
        return tuple(p for p in DEFAULT_PLATFORMS if p in self.variants)

    @property
    def aliases(self) -> tuple[str, ...]:
        return (f"{self.name}:{self.version}",)

    @property
    def slot_names(self) -> tuple[str, ...]:
        return tuple(slot.name for slot in self.slots)

    def slot(self, name: str) -> Slot:
        for slot in self.slots:
            if slot.name == name:
                return slot
        raise ValidationError(
            f"Recipe '{self.name}' has no dependency slot '{name}'.",
            hint="Known slots: " + (", ".join(self.slot_names) or "(none)"),
            context={"recipe": self.name, "slot": name},
        )

    def with_override(self, name: str, ref: ArtifactRef | None) -> RecipeSpec:
        """Return a copy with slot *name* bound to *ref* (``None`` clears it)."""
        return self.with_overrides({name: ref})

    def with_overrides(self, overrides: Mapping[str, ArtifactRef | None]) -> RecipeSpec:
        for name in overrides:
            self.slot(name)
        slots = tuple(
            replace(slot, override=overrides[slot.name]) if slot.name in overrides else slot
            for slot in self.slots
        )
        return replace(self, slots=slots)

    @classmethod
    def portable(
        cls,
        name: str,
        version: str,
        *,
        script: str,
        source: str | None = None,
        platforms: Iterable[Platform] = DEFAULT_PLATFORMS,
        slots: Iterable[Slot] = (),
        environments: Iterable[str] = (),
        includes: Iterable[str] = (),
    ) -> RecipeSpec:
        """Recipe whose source and script are identical on every platform."""
        variant = PlatformVariant(source=source, script=script)
        return cls(
            name=name,
            version=version,
            variants={coerce_platform(p): variant for p in platforms},
            slots=tuple(slots),
            environments=tuple(environments),
            includes=tuple(includes),
        )

    def _validate_slots(self) -> None:
        seen: list[str] = []
        for slot in self.slots:
            if not _SLOT_NAME.match(slot.name) or slot.name in IDENTITY_KEYS:
                raise ValidationError(
                    "Dependency slot names must be identifiers other than 'name' and 'version'.",
                    context={"recipe": self.name, "slot": slot.name},
                )
            if slot.name in seen:
                raise ValidationError(
                    "Dependency slot names must be unique.",
                    context={"recipe": self.name, "slot": slot.name},
                )
            default_slots = slot.default.slot_names
            for target, sibling in slot.inputs.items():
                if target not in default_slots:
                    raise ValidationError(
                        "Slot input targets an unknown slot of the default recipe.",
                        context={"recipe": self.name, "slot": slot.name, "target": target},
                    )
                if sibling not in seen:
                    raise ValidationError(
                        "Slot inputs may only reference earlier sibling slots.",
                        hint="Declare the sibling slot before the slot that consumes it.",
                        context={"recipe": self.name, "slot": slot.name, "sibling": sibling},
                    )
            seen.append(slot.name)

    def _validate_templates(self) -> None:
        known = IDENTITY_KEYS | set(self.slot_names)
        environments = list(self.environments)
        for variant in self.variants.values():
            environments.extend(variant.environments)
        for entry in environments:
            key, sep, _ = entry.partition("=")
            if not sep or not _SLOT_NAME.match(key):
                raise ValidationError(
                    "Environment entries must have the form KEY=value.",
                    context={"recipe": self.name, "entry": entry},
                )
        templates = [variant.script for variant in self.variants.values()]
        templates.extend(environments)
        for template in templates:
            if not template.strip():
                raise ValidationError(
                    "Recipe scripts must be non-empty.",
                    context={"recipe": self.name},
                )
            unknown = sorted(placeholders(template) - known)
            if unknown:
                raise ValidationError(
                    "Recipe template references unknown placeholders.",
                    hint="Placeholders must be 'name', 'version', or a dependency slot.",
                    context={"recipe": self.name, "placeholders": ",".join(unknown)},
                )


def placeholders(template: str) -> set[str]:
    return {match.group(1) for match in PLACEHOLDER.finditer(template)}


def render_template(template: str, values: Mapping[str, str], *, recipe: str) -> str:
    """Substitute every ``{{key}}`` token in *template* from *values*."""

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            raise ValidationError(
                "Template placeholder has no bound value.",
                context={"recipe": recipe, "placeholder": key},
            )
        return values[key]

    return PLACEHOLDER.sub(_substitute, template)


__all__ = [
    "IDENTITY_KEYS",
    "PLACEHOLDER",
    "RecipeSpec",
    "Slot",
    "placeholders",
    "render_template",
]
