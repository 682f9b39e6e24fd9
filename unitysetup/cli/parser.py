"""
unity-setup CLI argument parser.

This module implements the command-line interface for unity-setup using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from unitysetup.core.exceptions import UnitySetupError

try:
    from importlib.metadata import version

    __version__ = version("unity-setup")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """unity-setup command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="unity-setup",
            description="unity-setup - Provision Unity editors on CI machines",
            epilog='Use "unity-setup COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"unity-setup {__version__}"
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
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: PROJECT/unity-setup.yaml)",
        )
        parser.add_argument(
            "--project-path",
            type=Path,
            metavar="PATH",
            default=Path("."),
            help="Unity project directory (default: current directory)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_action_command(subparsers)
        self._add_resolve_command(subparsers)
        self._add_locate_command(subparsers)

        return parser

    def _add_version_arguments(self, parser):
        parser.add_argument(
            "--unity-version",
            metavar="VERSION",
            help="Editor version (default: read from the project)",
        )
        parser.add_argument(
            "--changeset",
            metavar="CHANGESET",
            help="Editor changeset (default: looked up online)",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install Unity Hub, the editor and modules",
            description="Install the required Unity editor and optional modules",
        )
        self._add_version_arguments(parser)
        parser.add_argument(
            "--module",
            dest="modules",
            action="append",
            metavar="NAME",
            help="Module to install (can be used multiple times)",
        )
        parser.add_argument(
            "--child-modules",
            action="store_true",
            default=None,
            help="Also install child modules",
        )
        parser.add_argument(
            "--install-path",
            metavar="DIR",
            help="Custom editors install directory",
        )
        parser.add_argument(
            "--self-hosted",
            action="store_true",
            default=None,
            help="Do not elevate privileges with sudo",
        )

    def _add_action_command(self, subparsers):
        """Add 'action' subcommand."""
        subparsers.add_parser(
            "action",
            help="Run as a GitHub Actions step",
            description="Read step inputs from INPUT_* variables and set step outputs",
        )

    def _add_resolve_command(self, subparsers):
        """Add 'resolve' subcommand."""
        parser = subparsers.add_parser(
            "resolve",
            help="Resolve the editor version and changeset",
            description="Print the editor version and changeset that would be installed",
        )
        self._add_version_arguments(parser)

    def _add_locate_command(self, subparsers):
        """Add 'locate' subcommand."""
        parser = subparsers.add_parser(
            "locate",
            help="Print the path of an installed editor",
            description="Query Unity Hub for an installed editor version",
        )
        self._add_version_arguments(parser)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except UnitySetupError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                logger.debug("Traceback:", exc_info=True)
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        configure_logging(verbose=args.verbose, quiet=args.quiet)

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "unitysetup.cli.commands.install",
            "action": "unitysetup.cli.commands.action",
            "resolve": "unitysetup.cli.commands.resolve",
            "locate": "unitysetup.cli.commands.locate",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def configure_logging(verbose: bool = False, quiet: bool = False):
    """Configure the root logger for a run."""
    if verbose:
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    elif quiet:
        level = logging.ERROR
        format_str = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        format_str = "%(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        force=True,  # Reconfigure if already configured
    )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
