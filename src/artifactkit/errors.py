"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers used across API surfaces."""

    VALIDATION = "E_VALIDATION"
    UNSUPPORTED_PLATFORM = "E_UNSUPPORTED_PLATFORM"
    DEPENDENCY_RESOLUTION = "E_DEPENDENCY_RESOLUTION"
    SUBMISSION = "E_SUBMISSION"
    LOCKFILE = "E_LOCKFILE"
    POLICY = "E_POLICY"


class ArtifactKitError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.context:
            for k, v in self.context.items():
                if v:
                    parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ValidationError(ArtifactKitError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.VALIDATION, hint=hint, context=context)


class UnsupportedPlatform(ArtifactKitError):
    """The session platform has no variant entry on a recipe."""

    recipe: str
    platform: str

    def __init__(
        self,
        recipe: str,
        platform: str,
        *,
        supported: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> None:
        self.recipe = recipe
        self.platform = str(platform)
        context = {"recipe": recipe, "platform": self.platform}
        if supported:
            context["supported"] = ",".join(supported)
        super().__init__(
            f"Recipe '{recipe}' does not support platform '{self.platform}'.",
            code=ErrorCode.UNSUPPORTED_PLATFORM,
            hint=hint or "Add a variant for this platform or build on a supported platform.",
            context=context,
        )


class DependencyResolutionFailure(ArtifactKitError):
    """A dependency slot could not be bound; wraps the originating error."""

    recipe: str
    slot: str
    cause: BaseException

    def __init__(
        self,
        recipe: str,
        slot: str,
        cause: BaseException,
        *,
        platform: str | None = None,
    ) -> None:
        self.recipe = recipe
        self.slot = slot
        self.cause = cause
        root = _root_of(cause)
        context = {
            "recipe": recipe,
            "slot": slot,
            "platform": platform or "",
            "cause": type(root).__name__,
            "detail": root.args[0] if root.args else "",
        }
        super().__init__(
            f"Failed to resolve dependency '{slot}' of recipe '{recipe}'.",
            code=ErrorCode.DEPENDENCY_RESOLUTION,
            context={k: str(v) for k, v in context.items()},
        )

    @property
    def root_cause(self) -> BaseException:
        """Innermost error of a nested resolution chain."""
        return _root_of(self.cause)


class SubmissionFailure(ArtifactKitError):
    """The executor rejected or failed a build submission."""

    recipe: str
    platform: str

    def __init__(
        self,
        recipe: str,
        platform: str,
        *,
        cause: BaseException | None = None,
        hint: str | None = None,
    ) -> None:
        self.recipe = recipe
        self.platform = str(platform)
        context = {"recipe": recipe, "platform": self.platform}
        if cause is not None:
            context["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(
            f"Executor failed to accept the build of '{recipe}'.",
            code=ErrorCode.SUBMISSION,
            hint=hint,
            context=context,
        )


class LockfileError(ArtifactKitError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.LOCKFILE, hint=hint, context=context)


class PolicyError(ArtifactKitError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.POLICY, hint=hint, context=context)


def _root_of(error: BaseException) -> BaseException:
    current = error
    while isinstance(current, DependencyResolutionFailure):
        current = current.cause
    return current


__all__ = [
    "ArtifactKitError",
    "DependencyResolutionFailure",
    "ErrorCode",
    "LockfileError",
    "PolicyError",
    "SubmissionFailure",
    "UnsupportedPlatform",
    "ValidationError",
]
