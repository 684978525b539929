"""
Install command implementation.

Installs a prebuilt tool, or one of the tools with a pinned version, and
prints where it ended up.
"""

import logging

from toolfetch.core.download import DownloadProgress, format_progress
from toolfetch.core.output import OK, safe_print
from toolfetch.install.installer import Installer

logger = logging.getLogger(__name__)


class _ProgressLine:
    """Redraws a single console line with download progress."""

    def __init__(self):
        self.shown = False

    def __call__(self, progress: DownloadProgress):
        print(f"\r  Downloading: {format_progress(progress)}", end="", flush=True)
        self.shown = True

    def finish(self):
        if self.shown:
            print()  # New line after progress
            self.shown = False


def run(args, settings) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments with:
            - command: 'install', 'install-wasm-pack' or 'install-cargo-generate'
            - tool, owner, tool_version, artifact: for 'install'
            - quiet: suppresses the progress line
        settings: Loaded Settings

    Returns:
        Exit code (0 for success)
    """
    progress = None if getattr(args, "quiet", False) else _ProgressLine()
    installer = Installer(settings, progress_callback=progress)

    try:
        if args.command == "install-wasm-pack":
            path = installer.install_wasm_pack()
        elif args.command == "install-cargo-generate":
            path = installer.install_cargo_generate()
        else:
            is_binary = not args.artifact
            download = installer.install(
                args.tool, args.owner, is_binary, args.tool_version
            )
            path = download.binary(args.tool) if is_binary else download.root
    finally:
        if progress is not None:
            progress.finish()

    logger.debug(f"Install finished: {path}")
    safe_print(f"{OK} {path}")
    return 0
