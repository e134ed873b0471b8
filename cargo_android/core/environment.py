"""
Environment access and typed wrapper configuration.

The wrapper is configured entirely through environment variables. They are
read exactly once, through an EnvironmentSource, into a WrapperConfig value
that is then passed down to the resolver and the process runner. Nothing
below the entry point touches os.environ directly.
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from cargo_android.core.platform import HostPlatform, detect_host

logger = logging.getLogger(__name__)

NDK_ROOT_VAR = "ANDROID_NDK_ROOT"
API_LEVEL_VAR = "ANDROID_API"
DRIVER_VAR = "CARGO"
ENCODED_RUSTFLAGS_VAR = "CARGO_ENCODED_RUSTFLAGS"
RUSTFLAGS_VAR = "RUSTFLAGS"
LOG_LEVEL_VAR = "CARGO_ANDROID_LOG"


class EnvironmentSource(ABC):
    """
    Abstract read-only view of a set of environment variables.

    Values are returned as they are stored by Python: on POSIX, bytes that
    are not valid UTF-8 show up as surrogate escapes.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Get a variable.

        Args:
            name: Variable name

        Returns:
            Variable value, or None if unset
        """
        pass

    @abstractmethod
    def as_dict(self) -> Dict[str, str]:
        """
        Snapshot of all variables.

        Returns:
            New dictionary; mutating it does not affect the source
        """
        pass


class OsEnvironment(EnvironmentSource):
    """Environment of the running process."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(os.environ)


class MappingEnvironment(EnvironmentSource):
    """Environment backed by an explicit mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


def as_text(value: Optional[str]) -> Optional[str]:
    """
    Return value if it is representable as UTF-8, else None.

    Cargo only accepts UTF-8 for its flag variables, so undecodable values
    are treated the same as unset ones.
    """
    if value is None:
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


@dataclass(frozen=True)
class WrapperConfig:
    """
    Configuration of a single wrapper invocation.

    Attributes:
        host: Host platform family
        ndk_root: Android NDK installation root (ANDROID_NDK_ROOT)
        api_override: Raw ANDROID_API value, unparsed
        driver: Build driver executable (CARGO)
        encoded_rustflags: CARGO_ENCODED_RUSTFLAGS, if set and valid UTF-8
        rustflags: RUSTFLAGS, if set and valid UTF-8
        log_level: Wrapper log level name (CARGO_ANDROID_LOG)
    """

    host: HostPlatform
    ndk_root: Optional[Path] = None
    api_override: Optional[str] = None
    driver: Optional[str] = None
    encoded_rustflags: Optional[str] = None
    rustflags: Optional[str] = None
    log_level: Optional[str] = None

    @classmethod
    def from_source(
        cls, source: EnvironmentSource, host: Optional[HostPlatform] = None
    ) -> "WrapperConfig":
        """
        Read the configuration from an environment source.

        Args:
            source: Environment to read
            host: Host platform (detected if None)

        Returns:
            WrapperConfig instance

        Raises:
            UnsupportedHostError: If host is None and detection fails
        """
        ndk_root = source.get(NDK_ROOT_VAR)

        config = cls(
            host=host if host is not None else detect_host(),
            ndk_root=Path(ndk_root) if ndk_root is not None else None,
            api_override=source.get(API_LEVEL_VAR),
            driver=source.get(DRIVER_VAR),
            encoded_rustflags=as_text(source.get(ENCODED_RUSTFLAGS_VAR)),
            rustflags=as_text(source.get(RUSTFLAGS_VAR)),
            log_level=source.get(LOG_LEVEL_VAR),
        )
        logger.debug(f"Wrapper configuration: {config}")
        return config
