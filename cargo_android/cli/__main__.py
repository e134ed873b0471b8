"""
Entry point for running cargo-android-env as a module.

Usage: python -m cargo_android.cli [--format yaml|env] TARGET
"""

from .parser import main

if __name__ == "__main__":
    main()
