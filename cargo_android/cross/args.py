"""
Locate the --target value in forwarded cargo arguments.
"""

from typing import Iterable, Optional, Union

from cargo_android.core.exceptions import InvalidTextError

TARGET_FLAG = "--target"
TARGET_PREFIX = TARGET_FLAG + "="

Arg = Union[str, bytes]


def _to_text(arg: Arg) -> Optional[str]:
    """Decode an argument strictly as UTF-8, or None if it is not text."""
    if isinstance(arg, bytes):
        try:
            return arg.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        arg.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable argv bytes are surrogate-escaped by Python
        return None
    return arg


def _to_lossy_text(arg: Arg) -> str:
    if isinstance(arg, bytes):
        return arg.decode("utf-8", errors="replace")
    return arg.encode("utf-8", errors="replace").decode("utf-8")


def find_target(args: Iterable[Arg]) -> Optional[str]:
    """
    Find the target triple passed to cargo.

    Both ``--target <triple>`` and ``--target=<triple>`` are recognized. The
    first occurrence wins; later ones are ignored, as is a trailing bare
    ``--target`` with no value.

    Args:
        args: Arguments after the program name and sub-command name

    Returns:
        Target triple, or None if no target was given

    Raises:
        InvalidTextError: If the target value itself is not valid UTF-8

    Example:
        >>> find_target(["build", "--target", "aarch64-linux-android"])
        'aarch64-linux-android'
        >>> find_target(["build", "--release"]) is None
        True
    """
    next_is_target = False

    for arg in args:
        text = _to_text(arg)
        if text is None:
            if next_is_target or _to_lossy_text(arg).startswith(TARGET_PREFIX):
                raise InvalidTextError(arg)
            continue

        if next_is_target:
            return text
        elif text == TARGET_FLAG:
            next_is_target = True
        elif text.startswith(TARGET_PREFIX):
            return text[len(TARGET_PREFIX) :]

    return None
