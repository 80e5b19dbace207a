"""Public package entrypoint for the artifact build-plan SDK."""

from .composer import ComposerState, ProjectComposer
from .environment import dev_environment
from .errors import (
    ArtifactKitError,
    DependencyResolutionFailure,
    ErrorCode,
    LockfileError,
    PolicyError,
    SubmissionFailure,
    UnsupportedPlatform,
    ValidationError,
)
from .executors import BuildExecutor, InProcessExecutor, RunReport
from .models import (
    DEFAULT_PLATFORMS,
    ArtifactRef,
    BuildSubmission,
    Platform,
    PlatformVariant,
    SourceSpec,
)
from .plan import BuildPlan, PlanLock
from .policy import Policy
from .project import Project, ProjectEntry, default_project
from .recipe import RecipeSpec, Slot
from .session import ResolutionSession

__all__ = [
    "ArtifactKitError",
    "ArtifactRef",
    "BuildExecutor",
    "BuildPlan",
    "BuildSubmission",
    "ComposerState",
    "DEFAULT_PLATFORMS",
    "DependencyResolutionFailure",
    "ErrorCode",
    "InProcessExecutor",
    "LockfileError",
    "Platform",
    "PlatformVariant",
    "PlanLock",
    "Policy",
    "PolicyError",
    "Project",
    "ProjectComposer",
    "ProjectEntry",
    "RecipeSpec",
    "ResolutionSession",
    "RunReport",
    "Slot",
    "SourceSpec",
    "SubmissionFailure",
    "UnsupportedPlatform",
    "ValidationError",
    "default_project",
    "dev_environment",
]
