"""
Host platform detection for cargo-android.

The NDK ships one prebuilt LLVM toolchain per host OS. Each host family has
its own prebuilt directory tag and its own file suffix conventions, so the
host is modelled as a small closed enum selected once at startup.

Usage:
    from cargo_android.core.platform import detect_host

    host = detect_host()
    print(host.prebuilt_dir)  # e.g. 'linux-x86_64'
"""

import functools
import platform
from enum import Enum

from cargo_android.core.exceptions import UnsupportedHostError


class HostPlatform(Enum):
    """
    Host OS families with an NDK prebuilt toolchain.

    Attributes:
        ndk_os: OS segment of the prebuilt directory name
        exe_suffix: Suffix of native executables (e.g. llvm-ar)
        clang_suffix: Suffix of the per-target clang wrapper scripts
    """

    LINUX = ("linux", "", "")
    MACOS = ("darwin", "", "")
    WINDOWS = ("windows", ".exe", ".cmd")

    def __init__(self, ndk_os: str, exe_suffix: str, clang_suffix: str):
        self.ndk_os = ndk_os
        self.exe_suffix = exe_suffix
        self.clang_suffix = clang_suffix

    @property
    def prebuilt_dir(self) -> str:
        """
        Name of the prebuilt toolchain directory for this host.

        The NDK only publishes x86_64 host toolchains (Apple Silicon hosts
        use the universal darwin-x86_64 build).

        Example:
            >>> HostPlatform.MACOS.prebuilt_dir
            'darwin-x86_64'
        """
        return f"{self.ndk_os}-x86_64"

    @property
    def supports_signals(self) -> bool:
        """Whether child processes can be terminated by POSIX signals."""
        return self is not HostPlatform.WINDOWS


@functools.lru_cache(maxsize=1)
def detect_host() -> HostPlatform:
    """
    Detect the host platform family.

    This function is cached - it only runs detection once per process.

    Returns:
        HostPlatform for the running interpreter

    Raises:
        UnsupportedHostError: If the OS has no NDK prebuilt toolchain
    """
    system = platform.system().lower()

    if system == "linux":
        return HostPlatform.LINUX
    elif system == "darwin":
        return HostPlatform.MACOS
    elif system == "windows":
        return HostPlatform.WINDOWS
    else:
        raise UnsupportedHostError(f"Unsupported host operating system: {system}")
