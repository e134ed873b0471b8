"""
Build the cargo environment for a resolved Android toolchain.
"""

import logging
import os
from typing import Dict, Mapping

from cargo_android.core.environment import ENCODED_RUSTFLAGS_VAR, WrapperConfig
from cargo_android.cross.flags import encode_flags
from cargo_android.cross.ndk import (
    AndroidToolchain,
    env_target_name,
    resolve_toolchain,
)

logger = logging.getLogger(__name__)


def build_android_env(toolchain: AndroidToolchain) -> Dict[str, str]:
    """
    Map a resolved toolchain to the variables cargo and the cc/bindgen
    crates read.

    Args:
        toolchain: Resolved Android toolchain

    Returns:
        Variables to add to the cargo environment
    """
    target = toolchain.target
    clang = os.fspath(toolchain.clang)
    sysroot = os.fspath(toolchain.sysroot)

    env = {
        f"AR_{target}": os.fspath(toolchain.ar),
        f"CC_{target}": clang,
        f"BINDGEN_EXTRA_CLANG_ARGS_{target}": f"--sysroot={sysroot}",
        f"CARGO_TARGET_{env_target_name(target)}_LINKER": clang,
    }

    if toolchain.rustflags is not None:
        env[ENCODED_RUSTFLAGS_VAR] = encode_flags(toolchain.rustflags)

    return env


def get_android_env(target: str, config: WrapperConfig) -> Dict[str, str]:
    """
    Resolve the toolchain for target and build its environment.

    Raises:
        ResolutionError: If the toolchain cannot be resolved
    """
    env = build_android_env(resolve_toolchain(target, config))
    for name, value in sorted(env.items()):
        logger.debug(f"{name}={value}")
    return env


def merge_environment(
    parent: Mapping[str, str], extra: Mapping[str, str]
) -> Dict[str, str]:
    """
    Overlay extra variables on a copy of parent.

    Returns:
        New dictionary; parent is left untouched
    """
    merged = dict(parent)
    merged.update(extra)
    return merged
