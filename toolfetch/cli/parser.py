"""
toolfetch CLI argument parser.

This module implements the command-line interface for toolfetch using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from toolfetch.config.settings import DEFAULT_CONFIG_FILE, load_settings

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("toolfetch")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """toolfetch command-line interface."""

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
            prog="toolfetch",
            description="toolfetch - download and cache prebuilt tool binaries",
            epilog='Use "toolfetch COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"toolfetch {__version__}"
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
            help=f"Path to configuration file (default: ./{DEFAULT_CONFIG_FILE})",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_pinned_commands(subparsers)
        self._add_list_command(subparsers)
        self._add_target_command(subparsers)

        return parser

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install a prebuilt tool",
            description="Download a prebuilt tool unless a compatible version is cached",
        )
        parser.add_argument("tool", metavar="TOOL", help="Tool name (e.g., wasm-pack)")
        parser.add_argument(
            "--owner",
            required=True,
            metavar="OWNER",
            help="Publisher of the tool (e.g., rustwasm)",
        )
        parser.add_argument(
            "--version",
            dest="tool_version",
            required=True,
            metavar="X.Y.Z",
            help="Semantic version to install",
        )
        parser.add_argument(
            "--artifact",
            action="store_true",
            help="Archive is not a single executable named after the tool",
        )

    def _add_pinned_commands(self, subparsers):
        """Add 'install-wasm-pack' and 'install-cargo-generate' subcommands."""
        subparsers.add_parser(
            "install-wasm-pack",
            help="Install the pinned wasm-pack",
            description="Install the configured wasm-pack version",
        )
        subparsers.add_parser(
            "install-cargo-generate",
            help="Install the pinned cargo-generate",
            description="Install the configured cargo-generate version",
        )

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List cached tools",
            description="List tool versions present in the cache",
        )
        parser.add_argument(
            "tool", nargs="?", metavar="TOOL", help="Only list versions of TOOL"
        )

    def _add_target_command(self, subparsers):
        """Add 'target' subcommand."""
        subparsers.add_parser(
            "target",
            help="Show the host target triple",
            description="Show the target triple used to select prebuilt archives",
        )

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
            settings = load_settings(self._config_file(parsed_args))
            return self._dispatch_command(parsed_args, settings)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _config_file(self, args) -> Optional[Path]:
        if args.config:
            return Path(args.config)

        default_config = Path.cwd() / DEFAULT_CONFIG_FILE
        return default_config if default_config.exists() else None

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
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args, settings) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field
            settings: Settings shared by all commands

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "toolfetch.cli.commands.install",
            "install-wasm-pack": "toolfetch.cli.commands.install",
            "install-cargo-generate": "toolfetch.cli.commands.install",
            "list": "toolfetch.cli.commands.list_tools",
            "target": "toolfetch.cli.commands.target",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args, settings)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
