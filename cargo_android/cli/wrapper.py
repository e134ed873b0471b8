"""
cargo-android wrapper entry point.

Cargo runs ``cargo-android android <args>`` for ``cargo android <args>``. The
wrapper finds the --target in <args>, adds the NDK toolchain variables for
Android targets and runs ``$CARGO <args>`` with them.
"""

import logging
import sys
from typing import Optional, Sequence

from cargo_android.core.environment import (
    DRIVER_VAR,
    EnvironmentSource,
    OsEnvironment,
    WrapperConfig,
)
from cargo_android.core.exceptions import CargoAndroidError, MissingConfigurationError
from cargo_android.core.platform import HostPlatform
from cargo_android.cli.runner import (
    UNKNOWN_EXIT_CODE,
    exit_code_from_returncode,
    run_driver,
)
from cargo_android.cross.args import find_target
from cargo_android.cross.env import get_android_env, merge_environment
from cargo_android.cross.ndk import is_android_target

logger = logging.getLogger(__name__)

# argv[0] is the wrapper itself, argv[1] the sub-command name cargo passes
FORWARDED_ARGS_START = 2


def configure_logging(level_name: Optional[str]) -> None:
    """
    Configure logging from a CARGO_ANDROID_LOG value.

    Args:
        level_name: 'debug', 'info', 'warning', 'error'/'quiet', or None
    """
    name = (level_name or "").strip().lower()

    if name == "debug":
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    elif name in ("error", "quiet"):
        level = logging.ERROR
        format_str = "%(message)s"
    elif name == "warning":
        level = logging.WARNING
        format_str = "%(message)s"
    else:
        level = logging.INFO
        format_str = "%(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Reconfigure if already configured
    )


def _run(argv: Sequence[str], source: EnvironmentSource, config: WrapperConfig) -> int:
    args = list(argv[FORWARDED_ARGS_START:])
    target = find_target(args)

    if config.driver is None:
        raise MissingConfigurationError(DRIVER_VAR)

    extra = {}
    if target is not None and is_android_target(target):
        extra = get_android_env(target, config)
    else:
        logger.debug(f"No Android target ({target!r}); running cargo unchanged")

    env = merge_environment(source.as_dict(), extra)
    returncode = run_driver(config.driver, args, env)

    return exit_code_from_returncode(returncode, config.host)


def run_wrapper(
    argv: Sequence[str],
    source: Optional[EnvironmentSource] = None,
    host: Optional[HostPlatform] = None,
) -> int:
    """
    Run one wrapper invocation.

    Logging is configured from the CARGO_ANDROID_LOG value of the
    configuration; if the configuration cannot be read, the default level
    is used to report why.

    Args:
        argv: Full argument vector, including program and sub-command name
        source: Environment to read (process environment if None)
        host: Host platform (detected if None)

    Returns:
        Exit code for the wrapper process
    """
    if source is None:
        source = OsEnvironment()

    try:
        config = WrapperConfig.from_source(source, host)
    except CargoAndroidError as e:
        configure_logging(None)
        logger.error(str(e))
        return UNKNOWN_EXIT_CODE

    configure_logging(config.log_level)

    try:
        return _run(argv, source, config)
    except CargoAndroidError as e:
        logger.error(str(e))
        return UNKNOWN_EXIT_CODE


def main():
    """Main entry point for the cargo-android wrapper."""
    sys.exit(run_wrapper(sys.argv))


if __name__ == "__main__":
    main()
