"""
Cargo global rustflags handling.

Cargo reads extra compiler flags from two variables: CARGO_ENCODED_RUSTFLAGS
(flags joined with the ASCII unit separator) and RUSTFLAGS (space-separated).
The encoded form takes precedence when both are set. Global flags also
completely override CARGO_TARGET_<triple>_RUSTFLAGS, so the wrapper appends
to the global value instead of using a target-scoped one.
"""

from typing import List, Optional

FLAG_SEPARATOR = "\x1f"


def decode_encoded_flags(value: str) -> List[str]:
    """
    Split a CARGO_ENCODED_RUSTFLAGS value.

    An empty value means no flags, matching cargo.

    Example:
        >>> decode_encoded_flags("-C\\x1fopt-level=3")
        ['-C', 'opt-level=3']
    """
    if not value:
        return []
    return value.split(FLAG_SEPARATOR)


def decode_space_flags(value: str) -> List[str]:
    """
    Split a RUSTFLAGS value on spaces, dropping empty tokens.

    Example:
        >>> decode_space_flags("  -C  opt-level=3 ")
        ['-C', 'opt-level=3']
    """
    return [token.strip() for token in value.split(" ") if token.strip()]


def encode_flags(flags: List[str]) -> str:
    """Join flags into the CARGO_ENCODED_RUSTFLAGS form."""
    return FLAG_SEPARATOR.join(flags)


def existing_flags(encoded: Optional[str], spaced: Optional[str]) -> List[str]:
    """
    Get the global flags already configured for cargo.

    Args:
        encoded: CARGO_ENCODED_RUSTFLAGS value, if set
        spaced: RUSTFLAGS value, if set

    Returns:
        Flag list (empty if neither is set)
    """
    if encoded is not None:
        return decode_encoded_flags(encoded)
    if spaced is not None:
        return decode_space_flags(spaced)
    return []


def merge_flags(
    encoded: Optional[str], spaced: Optional[str], extra: List[str]
) -> List[str]:
    """
    Append flags to the existing global flags.

    Args:
        encoded: CARGO_ENCODED_RUSTFLAGS value, if set
        spaced: RUSTFLAGS value, if set
        extra: Flags to append

    Returns:
        Existing flags followed by extra
    """
    return existing_flags(encoded, spaced) + list(extra)
