"""
Cross-compilation support for cargo-android.

This module finds the cargo target triple, resolves the Android NDK toolchain
for it and turns the result into cargo environment variables.
"""

from cargo_android.cross.args import find_target
from cargo_android.cross.env import (
    build_android_env,
    get_android_env,
    merge_environment,
)
from cargo_android.cross.ndk import (
    AndroidToolchain,
    is_android_target,
    resolve_toolchain,
)

__all__ = [
    "find_target",
    "AndroidToolchain",
    "is_android_target",
    "resolve_toolchain",
    "build_android_env",
    "get_android_env",
    "merge_environment",
]
