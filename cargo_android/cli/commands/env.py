"""
Print the cargo environment cargo-android would set for a target.
"""

import logging
import shlex
import sys
from typing import Dict

import yaml

from cargo_android.core.environment import OsEnvironment, WrapperConfig
from cargo_android.core.exceptions import CargoAndroidError
from cargo_android.cross.env import get_android_env
from cargo_android.cross.ndk import is_android_target

logger = logging.getLogger(__name__)


def format_env(env: Dict[str, str]) -> str:
    """
    Format variables as NAME=value lines with shell quoting.

    Example:
        >>> print(format_env({"AR_x": "/ndk/llvm-ar"}))
        AR_x=/ndk/llvm-ar
    """
    return "".join(
        f"{name}={shlex.quote(value)}\n" for name, value in sorted(env.items())
    )


def format_yaml(env: Dict[str, str]) -> str:
    """Format variables as a YAML mapping."""
    return yaml.safe_dump(dict(sorted(env.items())), default_flow_style=False)


def _write_stdout(text: str) -> None:
    # Undecodable path bytes come back out as the original bytes
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(text.encode("utf-8", errors="surrogateescape"))
    buffer.flush()


def run(args, source=None) -> int:
    """
    Execute the env command.

    Args:
        args: Parsed command-line arguments (target, format)
        source: EnvironmentSource to resolve against (process env if None)

    Returns:
        Exit code (0 for success, 1 for resolution errors)
    """
    if source is None:
        source = OsEnvironment()

    env: Dict[str, str] = {}
    try:
        if is_android_target(args.target):
            env = get_android_env(args.target, WrapperConfig.from_source(source))
        else:
            logger.info(f"{args.target} is not an Android target; nothing to set")
    except CargoAndroidError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.format == "env":
        _write_stdout(format_env(env))
    else:
        _write_stdout(format_yaml(env))

    return 0
