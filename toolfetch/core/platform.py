"""
Host platform detection for toolfetch.

This module maps the running host's operating system and CPU architecture to
the target triple used to select prebuilt tool archives.

Features:
- Operating system detection (Windows, Linux, macOS)
- CPU architecture detection and normalization (x86_64, aarch64)
- Target triple resolution for the four platforms with prebuilt binaries
- Fast detection with caching (once per process)

Usage:
    from toolfetch.core.platform import detect_host, resolve_target

    host = detect_host()
    print(f"Running on {host}")

    target = resolve_target()
    if target is None:
        print("No prebuilt binaries for this platform")
"""

import functools
import platform
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TargetTriple(str, Enum):
    """Target triples that have prebuilt binaries."""

    LINUX_X86_64 = "x86_64-unknown-linux-musl"
    MACOS_X86_64 = "x86_64-apple-darwin"
    WINDOWS_X86_64 = "x86_64-pc-windows-msvc"
    MACOS_AARCH64 = "aarch64-apple-darwin"

    def __str__(self) -> str:
        return self.value


_TARGETS = {
    ("linux", "x86_64"): TargetTriple.LINUX_X86_64,
    ("macos", "x86_64"): TargetTriple.MACOS_X86_64,
    ("windows", "x86_64"): TargetTriple.WINDOWS_X86_64,
    ("macos", "aarch64"): TargetTriple.MACOS_AARCH64,
}


@dataclass(frozen=True)
class HostInfo:
    """
    Operating system and architecture of the running host.

    Attributes:
        os: Normalized OS name ('linux', 'macos', 'windows') or the raw lowercase name
        arch: Normalized architecture ('x86_64', 'aarch64') or the raw lowercase name
    """

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


@functools.lru_cache(maxsize=1)
def detect_host() -> HostInfo:
    """
    Detect the current host.

    This function is cached - it only runs detection once per process.

    Returns:
        HostInfo for the running interpreter

    Example:
        >>> host = detect_host()
        >>> print(host)
        linux-x86_64
    """
    return HostInfo(
        os=_normalize_os(platform.system()),
        arch=_normalize_architecture(platform.machine()),
    )


def _normalize_os(system: str) -> str:
    """
    Normalize an operating system name.

    Returns:
        'windows', 'linux', 'macos', or the lowercase input when unknown
    """
    system = system.lower()

    if system == "windows" or system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        return system


def _normalize_architecture(machine: str) -> str:
    """
    Normalize a CPU architecture name.

    Returns:
        'x86_64', 'aarch64', or the lowercase input when unknown
    """
    machine = machine.lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x86_64"
    elif machine in ("aarch64", "arm64"):
        return "aarch64"
    else:
        return machine


def resolve_target(
    os_name: Optional[str] = None, arch: Optional[str] = None
) -> Optional[TargetTriple]:
    """
    Resolve the target triple for an OS/architecture pair.

    Args:
        os_name: OS name (raw or normalized). Detected from the host if None.
        arch: Architecture name (raw or normalized). Detected from the host if None.

    Returns:
        The matching TargetTriple, or None if no prebuilt binaries exist
        for the combination

    Example:
        >>> resolve_target("Darwin", "arm64")
        <TargetTriple.MACOS_AARCH64: 'aarch64-apple-darwin'>
        >>> resolve_target("linux", "riscv64") is None
        True
    """
    if os_name is None or arch is None:
        host = detect_host()
        os_name = host.os if os_name is None else os_name
        arch = host.arch if arch is None else arch

    return _TARGETS.get((_normalize_os(os_name), _normalize_architecture(arch)))


def get_supported_targets() -> list[str]:
    """
    Get list of all target triples with prebuilt binaries.

    Returns:
        List of target triple strings
    """
    return [target.value for target in TargetTriple]


def clear_platform_cache():
    """
    Clear the host detection cache.

    This forces the next call to detect_host() to re-detect.
    Useful for testing.
    """
    detect_host.cache_clear()


__all__ = [
    "TargetTriple",
    "HostInfo",
    "detect_host",
    "resolve_target",
    "get_supported_targets",
    "clear_platform_cache",
]
