"""Resolution session: dedup registry, accepted submissions, and aliases."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from artifactkit.executors.base import BuildExecutor
from artifactkit.models import ArtifactRef, BuildSubmission, Platform, RecipeKey
from artifactkit.observability import StructuredLogger
from artifactkit.plan import BuildPlan, PlanEntry
from artifactkit.platforms import coerce_platform
from artifactkit.policy import Policy
from artifactkit.recipe import RecipeSpec
from artifactkit.resolver import build_recipe


@dataclass(slots=True)
class ResolutionSession:
    """One build-graph construction pass for a single target platform.

    The session owns the registry that guarantees at-most-once submission per
    distinct recipe instance. It is mutated only by :func:`assemble`, after
    the executor accepted a submission.
    """

    platform: Platform
    executor: BuildExecutor
    policy: Policy = field(default_factory=Policy)
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    _registry: dict[RecipeKey, ArtifactRef] = field(init=False, default_factory=dict, repr=False)
    _entries: list[PlanEntry] = field(init=False, default_factory=list, repr=False)
    _aliases: dict[str, str] = field(init=False, default_factory=dict, repr=False)
    _names: dict[str, str] = field(init=False, default_factory=dict, repr=False)
    _owned: dict[str, PlanEntry] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.platform = coerce_platform(self.platform)

    def build(self, recipe: RecipeSpec, **overrides: ArtifactRef | None) -> ArtifactRef:
        """Resolve *recipe* and its prerequisites; keyword arguments override slots."""
        return build_recipe(self, recipe, overrides)

    def key_for(self, recipe: RecipeSpec, bindings: Mapping[str, ArtifactRef]) -> RecipeKey:
        return RecipeKey(
            name=recipe.name,
            version=recipe.version,
            platform=self.platform,
            inputs=tuple((slot, bindings[slot].digest) for slot in recipe.slot_names),
        )

    def lookup(self, key: RecipeKey) -> ArtifactRef | None:
        return self._registry.get(key)

    def digest_for_name(self, name: str) -> str | None:
        return self._names.get(name)

    def owns(self, ref: ArtifactRef) -> bool:
        """Whether *ref* was returned by this session's executor."""
        entry = self._owned.get(ref.digest)
        return entry is not None and entry.ref == ref

    def submission_for(self, ref: ArtifactRef) -> BuildSubmission | None:
        entry = self._owned.get(ref.digest)
        return None if entry is None else entry.submission

    def record(self, key: RecipeKey, ref: ArtifactRef, submission: BuildSubmission) -> None:
        self._registry[key] = ref
        entry = PlanEntry(ref=ref, submission=submission)
        self._entries.append(entry)
        self._owned[ref.digest] = entry
        self._names.setdefault(submission.name, submission.digest())
        if self.policy.register_aliases:
            for alias in submission.aliases:
                self._aliases.setdefault(alias, ref.digest)

    @property
    def submissions(self) -> tuple[BuildSubmission, ...]:
        return tuple(entry.submission for entry in self._entries)

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def plan(self) -> BuildPlan:
        return BuildPlan(
            platform=self.platform,
            entries=tuple(self._entries),
            aliases=dict(self._aliases),
        )

    def __len__(self) -> int:
        return len(self._entries)
