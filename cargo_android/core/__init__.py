"""
Core framework for cargo-android.

Host platform detection, environment access and the exception hierarchy.
"""

from cargo_android.core.environment import (
    EnvironmentSource,
    MappingEnvironment,
    OsEnvironment,
    WrapperConfig,
)
from cargo_android.core.exceptions import (
    CargoAndroidError,
    InvalidTextError,
    InvalidValueError,
    MissingConfigurationError,
    PathNotFoundError,
    ProcessError,
    ResolutionError,
    UnsupportedHostError,
)
from cargo_android.core.platform import HostPlatform, detect_host

__all__ = [
    # Environment
    "EnvironmentSource",
    "MappingEnvironment",
    "OsEnvironment",
    "WrapperConfig",
    # Platform
    "HostPlatform",
    "detect_host",
    # Exceptions
    "CargoAndroidError",
    "ResolutionError",
    "MissingConfigurationError",
    "PathNotFoundError",
    "InvalidValueError",
    "InvalidTextError",
    "UnsupportedHostError",
    "ProcessError",
]
