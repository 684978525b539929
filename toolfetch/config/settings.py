"""
Settings for toolfetch.

A Settings object is built once at process start (by the CLI or by the
embedding application) and handed to the Installer. Sources, lowest to
highest precedence:

1. Built-in defaults
2. Optional YAML file (toolfetch.yaml)
3. TOOLFETCH_CACHE environment variable (cache directory only)

Example toolfetch.yaml:

    cache_dir: ~/.cache/toolfetch
    base_url: https://workers.cloudflare.com
    install_permitted: true
    versions:
      wasm-pack: 0.10.0
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from toolfetch.core.directory import CACHE_ENV_VAR, get_cache_dir
from toolfetch.core.exceptions import ConfigError, InvalidVersionError
from toolfetch.core.version import Version
from toolfetch.install.dependencies import PINNED_VERSIONS
from toolfetch.install.urls import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "toolfetch.yaml"


@dataclass
class Settings:
    """Resolved toolfetch settings."""

    cache_dir: Path
    base_url: str = DEFAULT_BASE_URL
    install_permitted: bool = True
    versions: Dict[str, str] = field(default_factory=lambda: dict(PINNED_VERSIONS))

    def pinned_version(self, tool_name: str) -> Version:
        """
        Version configured for a tool with a convenience installer.

        Raises:
            ConfigError: If no version is configured for the tool
            InvalidVersionError: If the configured version does not parse
        """
        if tool_name not in self.versions:
            raise ConfigError(f"No pinned version configured for {tool_name}")
        return Version.parse(self.versions[tool_name])


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_file: YAML file to read. Missing files are ignored.
        environ: Environment mapping (default: os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values
    """
    environ = os.environ if environ is None else environ
    data = _load_yaml(Path(config_file)) if config_file else {}

    if "cache_dir" in data and not environ.get(CACHE_ENV_VAR):
        cache_dir = Path(str(data["cache_dir"])).expanduser()
    else:
        cache_dir = get_cache_dir(environ)

    base_url = data.get("base_url", DEFAULT_BASE_URL)
    if not isinstance(base_url, str) or not base_url.startswith(
        ("http://", "https://")
    ):
        raise ConfigError(f"base_url must be an http(s) URL, got: {base_url!r}")

    install_permitted = data.get("install_permitted", True)
    if not isinstance(install_permitted, bool):
        raise ConfigError(
            f"install_permitted must be true or false, got: {install_permitted!r}"
        )

    versions = dict(PINNED_VERSIONS)
    versions.update(_parse_versions(data.get("versions") or {}))

    settings = Settings(
        cache_dir=cache_dir,
        base_url=base_url,
        install_permitted=install_permitted,
        versions=versions,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings


def _load_yaml(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_file}")
    return data


def _parse_versions(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, dict):
        raise ConfigError("versions must be a mapping of tool name to version")

    versions = {}
    for tool_name, version in raw.items():
        # An unquoted `1.0` loads as a float and fails the strict parse
        try:
            versions[str(tool_name)] = str(Version.parse(str(version)))
        except InvalidVersionError as e:
            raise ConfigError(f"Invalid version for {tool_name}: {e}") from e
    return versions


__all__ = ["Settings", "load_settings", "DEFAULT_CONFIG_FILE"]
