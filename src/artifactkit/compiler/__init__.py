"""Compiler interfaces for emitting executor-ready build scripts."""

from .emit_scripts import ScriptEmission, emit_scripts, render_script

__all__ = [
    "ScriptEmission",
    "emit_scripts",
    "render_script",
]
