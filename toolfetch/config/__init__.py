"""
Configuration for toolfetch.

Settings are loaded once and injected into the Installer.
"""

from .settings import DEFAULT_CONFIG_FILE, Settings, load_settings

__all__ = ["DEFAULT_CONFIG_FILE", "Settings", "load_settings"]
