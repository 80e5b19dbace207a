"""Generic resolve-or-build over dependency slots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from artifactkit.assembler import assemble, check_name_conflict, prepare_submission
from artifactkit.errors import DependencyResolutionFailure, UnsupportedPlatform, ValidationError
from artifactkit.models import ArtifactRef
from artifactkit.platforms import select_variant
from artifactkit.recipe import RecipeSpec

if TYPE_CHECKING:
    from artifactkit.session import ResolutionSession


def resolve_or_build(
    session: ResolutionSession,
    recipe: RecipeSpec,
    override: ArtifactRef | None = None,
    *,
    inputs: Mapping[str, ArtifactRef] | None = None,
    slot: str | None = None,
) -> ArtifactRef:
    """Return *override* when given, else the ref of *recipe* built in *session*.

    An override short-circuits completely: *recipe* is neither validated
    against the session platform nor built. The override must be a ref the
    session itself produced, otherwise the plan could not list it before its
    consumers.
    """
    if override is not None:
        if not session.owns(override):
            session.logger.log(
                operation="override_rejected",
                recipe=recipe.name,
                platform=session.platform.value,
                slot=slot,
                level="error",
                message="Override was not produced by this session.",
                extra={"digest": override.digest},
            )
            context = {"recipe": recipe.name, "artifact": override.name, "digest": override.digest}
            if slot is not None:
                context["slot"] = slot
            raise ValidationError(
                f"Override '{override.name}:{override.version}' was not built in this session.",
                hint="Build the artifact in the same session and pass the returned ref.",
                context=context,
            )
        session.logger.log(
            operation="resolve_override",
            recipe=recipe.name,
            platform=session.platform.value,
            slot=slot,
            message="Bound caller-supplied artifact.",
            extra={"digest": override.digest},
        )
        return override
    session.logger.log(
        operation="resolve_default",
        recipe=recipe.name,
        platform=session.platform.value,
        slot=slot,
        message="Building default recipe for slot.",
    )
    return build_recipe(session, recipe, inputs)


def resolve_slots(session: ResolutionSession, recipe: RecipeSpec) -> dict[str, ArtifactRef]:
    """Bind every slot of *recipe* in declared order."""
    bindings: dict[str, ArtifactRef] = {}
    for slot in recipe.slots:
        inputs = {target: bindings[sibling] for target, sibling in slot.inputs.items()}
        try:
            bindings[slot.name] = resolve_or_build(
                session,
                slot.default,
                slot.override,
                inputs=inputs,
                slot=slot.name,
            )
        except Exception as exc:
            raise DependencyResolutionFailure(
                recipe.name,
                slot.name,
                exc,
                platform=session.platform.value,
            ) from exc
    return bindings


def build_recipe(
    session: ResolutionSession,
    recipe: RecipeSpec,
    overrides: Mapping[str, ArtifactRef | None] | None = None,
) -> ArtifactRef:
    """Resolve prerequisites of *recipe*, then submit it at most once per session."""
    if overrides:
        recipe = recipe.with_overrides(overrides)
    try:
        select_variant(recipe, session.platform)
    except UnsupportedPlatform:
        session.logger.log(
            operation="unsupported_platform",
            recipe=recipe.name,
            platform=session.platform.value,
            level="error",
            message="Recipe has no variant for the session platform.",
        )
        raise

    bindings = resolve_slots(session, recipe)
    key = session.key_for(recipe, bindings)
    existing = session.lookup(key)
    if existing is not None:
        recorded = session.submission_for(existing)
        if recorded is not None:
            check_name_conflict(
                session,
                prepare_submission(session, recipe, bindings),
                recorded.digest(),
                hint="Bump the version when a recipe's script or source changes.",
            )
        session.logger.log(
            operation="dedup_hit",
            recipe=recipe.name,
            platform=session.platform.value,
            message="Reused artifact already submitted in this session.",
            extra={"digest": existing.digest},
        )
        return existing
    return assemble(session, recipe, bindings)


__all__ = ["build_recipe", "resolve_or_build", "resolve_slots"]
