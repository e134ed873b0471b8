"""
cargo-android CLI module.

This module provides the cargo sub-command wrapper and the cargo-android-env
diagnostic command.
"""

from .parser import CLI, main
from .wrapper import run_wrapper
from . import runner

__all__ = ["CLI", "main", "run_wrapper", "runner"]
