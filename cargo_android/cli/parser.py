"""
cargo-android-env argument parser.

This module implements the diagnostic command that prints the environment
the wrapper would add for a target, using argparse.
"""

import argparse
import logging
import sys
from typing import List, Optional

from cargo_android import __version__

logger = logging.getLogger(__name__)


class CLI:
    """cargo-android-env command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="cargo-android-env",
            description="Show the NDK variables cargo-android sets for a target",
            epilog="ANDROID_NDK_ROOT must be set to resolve Android targets.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"cargo-android {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--format",
            choices=["yaml", "env"],
            default="yaml",
            metavar="FORMAT",
            help="Output format (yaml|env) [default: yaml]",
        )
        parser.add_argument(
            "target",
            metavar="TARGET",
            help="Rust target triple (e.g., aarch64-linux-android)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None, source=None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)
            source: EnvironmentSource to resolve against (process env if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        from cargo_android.cli.commands import env

        return env.run(parsed_args, source=source)

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stderr,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for cargo-android-env."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
