"""Build executor interfaces and implementations."""

from .base import BuildExecutor, RunReport
from .inprocess import InProcessExecutor

__all__ = [
    "BuildExecutor",
    "InProcessExecutor",
    "RunReport",
]
