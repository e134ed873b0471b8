"""
Centralized exception hierarchy for cargo-android.

Every failure the wrapper can detect is one of these exceptions. They all
carry a single descriptive message which the entry point reports once before
exiting with status 255.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class CargoAndroidError(Exception):
    """Base exception for all cargo-android errors."""

    pass


# ============================================================================
# Toolchain Resolution Exceptions
# ============================================================================


class ResolutionError(CargoAndroidError):
    """Base exception for errors raised while building the child environment."""

    pass


class MissingConfigurationError(ResolutionError):
    """Raised when a required environment variable is not set."""

    def __init__(self, variable: str, context: str = ""):
        self.variable = variable
        msg = f"{variable} must be set"
        if context:
            msg += f" {context}"
        super().__init__(msg)


class PathNotFoundError(ResolutionError):
    """Raised when a required NDK directory is missing or cannot be listed."""

    pass


class InvalidValueError(ResolutionError):
    """Raised when a configuration value cannot be parsed."""

    pass


class InvalidTextError(ResolutionError):
    """Raised when a required argument or path is not valid UTF-8 text."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid UTF-8: {value!r}")


class UnsupportedHostError(ResolutionError):
    """Raised when the host OS has no NDK prebuilt toolchain."""

    pass


# ============================================================================
# Process Exceptions
# ============================================================================


class ProcessError(CargoAndroidError):
    """Raised when the build driver cannot be spawned or waited on."""

    pass
