"""
User-facing console output.

Status lines for people (as opposed to log records) go through safe_print so
that emoji degrade to ASCII on consoles that cannot encode them.
"""

DOWN = "⬇️"
OK = "✅"
WARNING = "⚠️"

_ASCII_FALLBACKS = {
    DOWN: "[DOWNLOAD]",
    OK: "[OK]",
    WARNING: "WARNING:",
}


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe characters if Unicode emojis can't be encoded.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message
        for emoji, replacement in _ASCII_FALLBACKS.items():
            safe_message = safe_message.replace(emoji, replacement)
        print(safe_message.encode("ascii", "replace").decode("ascii"), file=file)
