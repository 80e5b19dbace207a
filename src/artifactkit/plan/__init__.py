"""Build plan model, serialization, and lock APIs."""

from .io import parse_plan, read_plan, serialize_plan, write_plan
from .lock import (
    PlanLock,
    build_lock,
    parse_lock,
    read_lock,
    serialize_lock,
    verify_lock,
    write_lock,
)
from .model import BuildPlan, PlanEntry, validate_plan

__all__ = [
    "BuildPlan",
    "PlanEntry",
    "PlanLock",
    "build_lock",
    "parse_lock",
    "parse_plan",
    "read_lock",
    "read_plan",
    "serialize_lock",
    "serialize_plan",
    "validate_plan",
    "verify_lock",
    "write_lock",
    "write_plan",
]
