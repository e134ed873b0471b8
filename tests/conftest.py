"""
Pytest configuration and shared fixtures for cargo-android tests.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest

from cargo_android.core.environment import MappingEnvironment, WrapperConfig
from cargo_android.core.platform import HostPlatform


def create_ndk(
    root: Path,
    host: HostPlatform = HostPlatform.LINUX,
    api_levels: Optional[Dict[str, Iterable[str]]] = None,
    clang_versions: Iterable[str] = ("17",),
) -> Path:
    """
    Create a synthetic NDK tree.

    Args:
        root: NDK root to create
        host: Host whose prebuilt toolchain directory is created
        api_levels: Target triple -> entry names under sysroot/usr/lib/<triple>
        clang_versions: Version directories under lib/clang

    Returns:
        Prebuilt toolchain directory
    """
    if api_levels is None:
        api_levels = {
            "aarch64-linux-android": ["21", "30", "34"],
            "armv7-linux-androideabi": ["21", "33"],
            "thumbv7neon-linux-androideabi": ["21", "33"],
            "x86_64-linux-android": ["21", "34"],
            "i686-linux-android": ["21", "34"],
        }

    toolchain = root / "toolchains" / "llvm" / "prebuilt" / host.prebuilt_dir
    (toolchain / "bin").mkdir(parents=True)

    for target, entries in api_levels.items():
        lib_dir = toolchain / "sysroot" / "usr" / "lib" / target
        lib_dir.mkdir(parents=True)
        for entry in entries:
            (lib_dir / entry).mkdir()

    for version in clang_versions:
        (toolchain / "lib" / "clang" / version / "lib" / "linux").mkdir(parents=True)

    return toolchain


def make_config(
    ndk_root: Optional[Path], host=HostPlatform.LINUX, **env
) -> WrapperConfig:
    """Build a WrapperConfig from keyword environment variables."""
    values = {name: value for name, value in env.items() if value is not None}
    if ndk_root is not None:
        values["ANDROID_NDK_ROOT"] = str(ndk_root)
    return WrapperConfig.from_source(MappingEnvironment(values), host=host)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def ndk_root(tmp_path: Path) -> Path:
    """Synthetic NDK for a Linux host."""
    root = tmp_path / "android-ndk"
    create_ndk(root)
    return root


@pytest.fixture
def toolchain_dir(ndk_root: Path) -> Path:
    """Prebuilt toolchain directory of the synthetic NDK."""
    return ndk_root / "toolchains" / "llvm" / "prebuilt" / "linux-x86_64"


@pytest.fixture
def clean_env() -> Dict[str, str]:
    """Copy of the process environment without wrapper-related variables."""
    env = dict(os.environ)
    for name in (
        "ANDROID_NDK_ROOT",
        "ANDROID_API",
        "CARGO",
        "CARGO_ENCODED_RUSTFLAGS",
        "RUSTFLAGS",
        "CARGO_ANDROID_LOG",
    ):
        env.pop(name, None)
    return env


@pytest.fixture
def make_ndk():
    """Factory for synthetic NDK trees (see create_ndk)."""
    return create_ndk


@pytest.fixture
def config_factory():
    """Factory for WrapperConfig values (see make_config)."""
    return make_config
