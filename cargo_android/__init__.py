"""
cargo-android - Android NDK toolchain wrapper for cargo.

Resolves the NDK clang toolchain for an Android target triple and runs the
real cargo with the matching AR/CC/linker environment variables.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
