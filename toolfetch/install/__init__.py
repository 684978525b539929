"""
Installation decision engine.

Decides whether a tool must be downloaded or an installed copy reused, and
drives the artifact cache accordingly.
"""

from .installer import Installer
from .inspector import CacheInspector
from .resolver import (
    InstallDecision,
    InstalledAt,
    NeedsInstall,
    VersionResolver,
    is_compatible,
)
from .urls import build_url, prebuilt_url

__all__ = [
    "Installer",
    "CacheInspector",
    "InstallDecision",
    "InstalledAt",
    "NeedsInstall",
    "VersionResolver",
    "is_compatible",
    "build_url",
    "prebuilt_url",
]
