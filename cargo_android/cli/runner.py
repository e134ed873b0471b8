"""
Run the build driver and translate its termination status.
"""

import logging
import subprocess
from typing import List, Mapping, Optional, Sequence

from cargo_android.core.exceptions import ProcessError
from cargo_android.core.platform import HostPlatform

logger = logging.getLogger(__name__)

# Exit status when the child's termination cannot be expressed as a code
UNKNOWN_EXIT_CODE = 255
SIGNAL_EXIT_BASE = 128


def exit_code_from_returncode(returncode: Optional[int], host: HostPlatform) -> int:
    """
    Convert a subprocess return code into a process exit code.

    Args:
        returncode: Popen.returncode (negative -N when killed by signal N)
        host: Host platform family

    Returns:
        The child's own code, 128 + N for signal N, or 255 otherwise

    Example:
        >>> exit_code_from_returncode(-9, HostPlatform.LINUX)
        137
    """
    if returncode is None:
        return UNKNOWN_EXIT_CODE
    if returncode >= 0:
        return returncode
    if host.supports_signals:
        return SIGNAL_EXIT_BASE - returncode
    return UNKNOWN_EXIT_CODE


def format_command(cmd: Sequence[str]) -> str:
    return " ".join(cmd)


def run_driver(driver: str, args: Sequence[str], env: Mapping[str, str]) -> int:
    """
    Run the build driver with inherited stdio and wait for it to exit.

    The wait cannot be cancelled: a Ctrl+C reaches the child through the
    terminal's process group, so the wrapper keeps waiting for the child to
    finish on its own.

    Args:
        driver: Build driver executable
        args: Arguments forwarded verbatim
        env: Complete child environment

    Returns:
        Popen.returncode of the child

    Raises:
        ProcessError: If the child cannot be spawned or waited on
    """
    cmd: List[str] = [driver, *args]
    logger.debug(f"Running: {format_command(cmd)}")

    try:
        process = subprocess.Popen(cmd, env=dict(env))
    except (OSError, ValueError) as e:
        raise ProcessError(f"{format_command(cmd)}: {e}") from e

    while True:
        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupted; waiting for child to exit")
            continue
        except OSError as e:
            raise ProcessError(f"{format_command(cmd)}: {e}") from e

        logger.debug(f"Child exited with return code {returncode}")
        return returncode
