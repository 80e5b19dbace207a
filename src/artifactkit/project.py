"""Project declarations: ordered top-level recipes with shared prerequisites."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from artifactkit.catalog import get_recipe
from artifactkit.errors import ValidationError
from artifactkit.recipe import RecipeSpec


@dataclass(frozen=True, slots=True)
class ProjectEntry:
    """One top-level build; ``overrides`` maps a slot to an earlier entry name."""

    name: str
    overrides: Mapping[str, str] = field(default_factory=dict)
    recipe: RecipeSpec | None = None

    def resolve_recipe(self) -> RecipeSpec:
        if self.recipe is not None:
            return self.recipe
        return get_recipe(self.name)


@dataclass(frozen=True, slots=True)
class Project:
    entries: tuple[ProjectEntry, ...]
    name: str = "default"
    environment: RecipeSpec | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        if not self.entries:
            raise ValidationError(
                "Projects require at least one entry.",
                context={"project": self.name},
            )
        seen: list[str] = []
        for entry in self.entries:
            if entry.name in seen:
                raise ValidationError(
                    "Project entry names must be unique.",
                    context={"project": self.name, "entry": entry.name},
                )
            for slot, source in entry.overrides.items():
                if source not in seen:
                    raise ValidationError(
                        "Project overrides may only reference earlier entries.",
                        hint="Move the shared entry before the entries that consume it.",
                        context={"project": self.name, "entry": entry.name, "slot": slot},
                    )
            seen.append(entry.name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)


SHARED: tuple[ProjectEntry, ...] = (
    ProjectEntry("go"),
    ProjectEntry("libevent"),
    ProjectEntry("libgpg-error"),
    ProjectEntry("libassuan", {"libgpg_error": "libgpg-error"}),
    ProjectEntry("libgcrypt", {"libgpg_error": "libgpg-error"}),
    ProjectEntry("libksba", {"libgpg_error": "libgpg-error"}),
    ProjectEntry("ncurses"),
    ProjectEntry("npth"),
    ProjectEntry("openjdk"),
    ProjectEntry("pkg-config"),
    ProjectEntry("readline", {"ncurses": "ncurses"}),
)

TOOLS: tuple[ProjectEntry, ...] = (
    ProjectEntry("argocd"),
    ProjectEntry("awscli2"),
    ProjectEntry("bat"),
    ProjectEntry("bottom"),
    ProjectEntry("crane"),
    ProjectEntry("cue"),
    ProjectEntry("direnv"),
    ProjectEntry("doppler"),
    ProjectEntry("fd"),
    ProjectEntry("fluxcd"),
    ProjectEntry("golangci-lint"),
    ProjectEntry(
        "gpg",
        {
            "libassuan": "libassuan",
            "libgcrypt": "libgcrypt",
            "libgpg_error": "libgpg-error",
            "libksba": "libksba",
            "npth": "npth",
        },
    ),
    ProjectEntry("helm"),
    ProjectEntry("jq"),
    ProjectEntry("just"),
    ProjectEntry("k9s"),
    ProjectEntry("kn"),
    ProjectEntry("kubectl"),
    ProjectEntry("kubeseal"),
    ProjectEntry("lazygit"),
    ProjectEntry("neovim"),
    ProjectEntry("nginx"),
    ProjectEntry(
        "nnn",
        {"ncurses": "ncurses", "pkg_config": "pkg-config", "readline": "readline"},
    ),
    ProjectEntry("openapi-generator-cli", {"openjdk": "openjdk"}),
    ProjectEntry("ripgrep"),
    ProjectEntry("skopeo", {"go": "go"}),
    ProjectEntry("starship"),
    ProjectEntry("terraform"),
    ProjectEntry("tmux", {"libevent": "libevent", "ncurses": "ncurses"}),
    ProjectEntry("umoci", {"go": "go"}),
    ProjectEntry("yq"),
    ProjectEntry("zsh", {"ncurses": "ncurses"}),
)


def default_project() -> Project:
    """Shared libraries first, then the tools that consume them as overrides."""
    return Project(entries=SHARED + TOOLS)


def catalog_project(names: tuple[str, ...] | list[str]) -> Project:
    """Project of the named catalog recipes, each resolving its own prerequisites."""
    return Project(entries=tuple(ProjectEntry(name) for name in names), name="catalog")


__all__ = ["Project", "ProjectEntry", "catalog_project", "default_project"]
