"""Build plan assembler: turns one resolved recipe into one executor submission."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from artifactkit.errors import SubmissionFailure, ValidationError
from artifactkit.models import ArtifactRef, BuildSubmission, SourceSpec
from artifactkit.platforms import select_variant
from artifactkit.policy import ensure_name_available
from artifactkit.recipe import PLACEHOLDER, RecipeSpec, render_template

if TYPE_CHECKING:
    from artifactkit.session import ResolutionSession


def instantiate_script(
    recipe: RecipeSpec,
    template: str,
    bindings: Mapping[str, ArtifactRef],
) -> str:
    """Replace slot placeholders with environment keys and identity placeholders with values."""
    missing = [name for name in recipe.slot_names if name not in bindings]
    if missing:
        raise ValidationError(
            "Every dependency slot must be bound before the script is instantiated.",
            context={"recipe": recipe.name, "slots": ",".join(missing)},
        )
    values = {"name": recipe.name, "version": recipe.version}
    values.update({name: bindings[name].env_key for name in recipe.slot_names})
    rendered = render_template(template, values, recipe=recipe.name)
    if PLACEHOLDER.search(rendered):
        raise ValidationError(
            "Instantiated script still contains a placeholder.",
            context={"recipe": recipe.name},
        )
    return rendered


def prepare_submission(
    session: ResolutionSession,
    recipe: RecipeSpec,
    bindings: Mapping[str, ArtifactRef],
) -> BuildSubmission:
    """Render the submission *recipe* would produce with *bindings* on the session platform."""
    platform = session.platform
    variant = select_variant(recipe, platform)
    script = instantiate_script(recipe, variant.script, bindings)
    environments = tuple(
        instantiate_script(recipe, entry, bindings)
        for entry in (*recipe.environments, *variant.environments)
    )
    source = None
    if variant.source is not None:
        source = SourceSpec(name=recipe.name, location=variant.source, includes=recipe.includes)

    return BuildSubmission(
        name=recipe.name,
        version=recipe.version,
        platform=platform,
        inputs=tuple(bindings[name] for name in recipe.slot_names),
        source=source,
        script=script,
        environments=environments,
        systems=recipe.platforms,
        aliases=recipe.aliases,
    )


def check_name_conflict(
    session: ResolutionSession,
    submission: BuildSubmission,
    existing_digest: str | None,
    *,
    hint: str | None = None,
) -> None:
    """Apply the session name-conflict policy and log the conflict when one is seen."""
    digest = submission.digest()
    conflict = ensure_name_available(
        policy=session.policy,
        name=submission.name,
        existing_digest=existing_digest,
        digest=digest,
        hint=hint,
    )
    if conflict:
        session.logger.log(
            operation="name_conflict",
            recipe=submission.name,
            platform=session.platform.value,
            level="warning",
            message="Artifact name submitted more than once with different content.",
            extra={"existing": existing_digest, "digest": digest},
        )


def assemble(
    session: ResolutionSession,
    recipe: RecipeSpec,
    bindings: Mapping[str, ArtifactRef],
) -> ArtifactRef:
    platform = session.platform
    submission = prepare_submission(session, recipe, bindings)
    check_name_conflict(session, submission, session.digest_for_name(recipe.name))

    try:
        ref = session.executor.submit(submission)
    except SubmissionFailure:
        _log_failure(session, recipe)
        raise
    except Exception as exc:
        _log_failure(session, recipe)
        raise SubmissionFailure(recipe.name, platform.value, cause=exc) from exc
    if not isinstance(ref, ArtifactRef):
        _log_failure(session, recipe)
        raise SubmissionFailure(
            recipe.name,
            platform.value,
            hint="Executors must return an ArtifactRef from submit().",
        )

    session.record(session.key_for(recipe, bindings), ref, submission)
    session.logger.log(
        operation="submit",
        recipe=recipe.name,
        platform=platform.value,
        message="Submitted build to executor.",
        extra={"digest": ref.digest, "inputs": [dep.digest for dep in submission.inputs]},
    )
    return ref


def _log_failure(session: ResolutionSession, recipe: RecipeSpec) -> None:
    session.logger.log(
        operation="submission_failed",
        recipe=recipe.name,
        platform=session.platform.value,
        level="error",
        message="Executor rejected the build submission.",
    )


__all__ = ["assemble", "check_name_conflict", "instantiate_script", "prepare_submission"]
