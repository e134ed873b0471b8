"""
Entry point for running the cargo-android wrapper as a module.

Usage: python -m cargo_android android [cargo arguments]
"""

from cargo_android.cli.wrapper import main

if __name__ == "__main__":
    main()
