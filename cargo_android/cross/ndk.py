"""
Android NDK toolchain resolution.

This module locates the NDK's prebuilt LLVM toolchain for the host, picks the
Android API level and computes the archiver and clang wrapper paths for a
Rust target triple.

NDK layout used here:

    <ndk>/toolchains/llvm/prebuilt/<host>-x86_64/
        bin/llvm-ar
        bin/<triple><api>-clang
        lib/clang/<version>/lib/linux/
        sysroot/usr/lib/<triple>/<api>/
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from cargo_android.core.environment import (
    API_LEVEL_VAR,
    NDK_ROOT_VAR,
    WrapperConfig,
    as_text,
)
from cargo_android.core.exceptions import (
    InvalidTextError,
    InvalidValueError,
    MissingConfigurationError,
    PathNotFoundError,
)
from cargo_android.cross.flags import merge_flags

logger = logging.getLogger(__name__)

MAX_API_LEVEL = 255

# Rust ARM targets whose NDK clang wrappers use a different prefix
CLANG_TARGET_ALIASES = {
    "armv7-linux-androideabi": "armv7a-linux-androideabi",
    "thumbv7neon-linux-androideabi": "armv7a-linux-androideabi",
}

# Rust's x86_64 Android target needs compiler-rt builtins linked explicitly
# (https://github.com/rust-lang/rust/issues/109717)
BUILTINS_WORKAROUND_TARGET = "x86_64-linux-android"
BUILTINS_LIBRARY = "clang_rt.builtins-x86_64-android"

_API_LEVEL_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class AndroidToolchain:
    """
    Resolved NDK toolchain for one Android target.

    Attributes:
        target: Rust target triple as given on the command line
        clang_target: Triple prefix of the NDK clang wrapper
        ndk_root: NDK installation root
        toolchain_dir: Prebuilt LLVM toolchain for the host
        sysroot: Toolchain sysroot
        api_level: Android API level
        ar: llvm-ar path
        clang: Per-target clang wrapper path
        clang_rt_dir: compiler-rt library directory (x86_64 workaround only)
        rustflags: Merged global rustflags (x86_64 workaround only)
    """

    target: str
    clang_target: str
    ndk_root: Path
    toolchain_dir: Path
    sysroot: Path
    api_level: int
    ar: Path
    clang: Path
    clang_rt_dir: Optional[str] = None
    rustflags: Optional[List[str]] = None


def is_android_target(target: str) -> bool:
    """Whether a target triple is an Android target."""
    return "android" in target


def env_target_name(target: str) -> str:
    """
    Target triple in the form cargo uses in variable names.

    Example:
        >>> env_target_name("aarch64-linux-android")
        'AARCH64_LINUX_ANDROID'
    """
    return target.upper().replace("-", "_")


def clang_target_name(target: str) -> str:
    """
    Triple prefix of the NDK clang wrapper for a Rust target.

    Example:
        >>> clang_target_name("thumbv7neon-linux-androideabi")
        'armv7a-linux-androideabi'
    """
    return CLANG_TARGET_ALIASES.get(target, target)


def parse_api_level(value: str) -> Optional[int]:
    """
    Parse an API level.

    Returns:
        Level in [0, 255], or None if value is not a decimal in range
    """
    if not _API_LEVEL_RE.fullmatch(value):
        return None
    level = int(value)
    if level > MAX_API_LEVEL:
        return None
    return level


def detect_api_level(lib_dir: Path) -> int:
    """
    Find the highest API level shipped in a sysroot library directory.

    Every entry whose name is an API level counts; other entries are ignored.

    Args:
        lib_dir: ``<sysroot>/usr/lib/<target>``

    Returns:
        Highest API level found

    Raises:
        PathNotFoundError: If the directory cannot be listed or has no levels
    """
    try:
        names = os.listdir(lib_dir)
    except OSError as e:
        raise PathNotFoundError(f"{lib_dir}: {e.strerror or e}") from e

    levels = [
        level
        for level in (parse_api_level(name) for name in names if as_text(name))
        if level is not None
    ]
    if not levels:
        raise PathNotFoundError(f"Failed to get API list from: {lib_dir}")

    return max(levels)


def find_clang_runtime_dir(toolchain_dir: Path) -> str:
    """
    Locate the compiler-rt library directory bundled with the NDK clang.

    Args:
        toolchain_dir: Prebuilt LLVM toolchain directory

    Returns:
        ``<toolchain>/lib/clang/<version>/lib/linux`` as text

    Raises:
        PathNotFoundError: If lib/clang cannot be listed or is empty
        InvalidTextError: If the path is not valid UTF-8
    """
    clang_dir = toolchain_dir / "lib" / "clang"

    try:
        versions = sorted(os.listdir(clang_dir))
    except OSError as e:
        raise PathNotFoundError(
            f"Failed to list directory: {clang_dir}: {e.strerror or e}"
        ) from e

    if not versions:
        raise PathNotFoundError(f"Missing clang version: {clang_dir}")

    rt_dir = os.fspath(clang_dir / versions[0] / "lib" / "linux")
    if as_text(rt_dir) is None:
        raise InvalidTextError(rt_dir)

    return rt_dir


def _resolve_api_level(config: WrapperConfig, sysroot: Path, target: str) -> int:
    if config.api_override is not None:
        text = as_text(config.api_override)
        level = parse_api_level(text) if text is not None else None
        if level is None:
            raise InvalidValueError(
                f"Invalid {API_LEVEL_VAR}: {config.api_override!r}"
            )
        logger.debug(f"Using API level {level} from {API_LEVEL_VAR}")
        return level

    lib_dir = sysroot / "usr" / "lib" / target
    level = detect_api_level(lib_dir)
    logger.debug(f"Detected API level {level} from {lib_dir}")
    return level


def resolve_toolchain(target: str, config: WrapperConfig) -> AndroidToolchain:
    """
    Resolve the NDK toolchain for an Android target.

    Args:
        target: Rust target triple (e.g. 'aarch64-linux-android')
        config: Wrapper configuration

    Returns:
        AndroidToolchain for the target

    Raises:
        MissingConfigurationError: If ANDROID_NDK_ROOT is not set
        PathNotFoundError: If an NDK directory is missing
        InvalidValueError: If ANDROID_API is not a valid level
        InvalidTextError: If the x86_64 runtime path is not valid UTF-8

    Example:
        >>> config = WrapperConfig.from_source(OsEnvironment())
        >>> toolchain = resolve_toolchain("aarch64-linux-android", config)
        >>> toolchain.clang.name
        'aarch64-linux-android34-clang'
    """
    if config.ndk_root is None:
        raise MissingConfigurationError(NDK_ROOT_VAR, "when building for Android")

    host = config.host
    ndk_root = config.ndk_root
    clang_target = clang_target_name(target)

    toolchain_dir = ndk_root / "toolchains" / "llvm" / "prebuilt" / host.prebuilt_dir
    if not os.path.exists(toolchain_dir):
        raise PathNotFoundError(f"Toolchain directory not found: {toolchain_dir}")

    sysroot = toolchain_dir / "sysroot"
    api_level = _resolve_api_level(config, sysroot, target)

    bin_dir = toolchain_dir / "bin"
    ar = bin_dir / f"llvm-ar{host.exe_suffix}"
    clang = bin_dir / f"{clang_target}{api_level}-clang{host.clang_suffix}"

    clang_rt_dir = None
    rustflags = None
    if target == BUILTINS_WORKAROUND_TARGET:
        clang_rt_dir = find_clang_runtime_dir(toolchain_dir)
        rustflags = merge_flags(
            config.encoded_rustflags,
            config.rustflags,
            ["-L", clang_rt_dir, "-l", f"static={BUILTINS_LIBRARY}"],
        )
        logger.debug(f"Linking {BUILTINS_LIBRARY} from {clang_rt_dir}")

    logger.debug(f"Resolved {target}: ar={ar} clang={clang} sysroot={sysroot}")

    return AndroidToolchain(
        target=target,
        clang_target=clang_target,
        ndk_root=ndk_root,
        toolchain_dir=toolchain_dir,
        sysroot=sysroot,
        api_level=api_level,
        ar=ar,
        clang=clang,
        clang_rt_dir=clang_rt_dir,
        rustflags=rustflags,
    )
