"""
Target command implementation.

Prints the target triple used to pick prebuilt archives for this host.
"""

from toolfetch.core.output import WARNING, safe_print
from toolfetch.core.platform import detect_host, resolve_target


def run(args, settings) -> int:
    """
    Run the target command.

    Returns:
        Exit code (0 if the host is supported, 1 otherwise)
    """
    host = detect_host()
    target = resolve_target()

    if target is None:
        safe_print(f"{WARNING} No prebuilt binaries are available for {host}")
        return 1

    print(target.value)
    return 0
