"""
Tests for settings loading.
"""

import pytest
from pathlib import Path

from toolfetch.config.settings import Settings, load_settings
from toolfetch.core.exceptions import ConfigError
from toolfetch.core.version import Version
from toolfetch.install.dependencies import PINNED_VERSIONS
from toolfetch.install.urls import DEFAULT_BASE_URL


def _write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "toolfetch.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self, tmp_path):
        settings = Settings(cache_dir=tmp_path)

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.install_permitted is True
        assert settings.versions == PINNED_VERSIONS

    def test_versions_not_shared(self, tmp_path):
        """Test each instance gets its own versions mapping."""
        first = Settings(cache_dir=tmp_path)
        first.versions["wasm-pack"] = "9.9.9"

        assert Settings(cache_dir=tmp_path).versions["wasm-pack"] == "0.9.1"

    def test_pinned_version(self, tmp_path):
        assert Settings(cache_dir=tmp_path).pinned_version("cargo-generate") == Version(0, 5, 0)

    def test_pinned_version_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="No pinned version configured for foo"):
            Settings(cache_dir=tmp_path).pinned_version("foo")


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_no_config_file(self, tmp_path):
        """Test defaults plus the environment cache override."""
        settings = load_settings(environ={"TOOLFETCH_CACHE": str(tmp_path)})

        assert settings == Settings(cache_dir=tmp_path)

    def test_missing_config_file_ignored(self, tmp_path):
        settings = load_settings(
            tmp_path / "missing.yaml", environ={"TOOLFETCH_CACHE": str(tmp_path)}
        )
        assert settings.base_url == DEFAULT_BASE_URL

    def test_full_config(self, tmp_path):
        config_file = _write_config(
            tmp_path,
            "cache_dir: {}\n"
            "base_url: http://mirror.local\n"
            "install_permitted: false\n"
            "versions:\n"
            "  wasm-pack: 0.10.0\n".format(tmp_path / "tools"),
        )

        settings = load_settings(config_file, environ={})

        assert settings.cache_dir == tmp_path / "tools"
        assert settings.base_url == "http://mirror.local"
        assert settings.install_permitted is False
        assert settings.versions == {"wasm-pack": "0.10.0", "cargo-generate": "0.5.0"}

    def test_env_overrides_config_cache_dir(self, tmp_path):
        """Test TOOLFETCH_CACHE wins over the file."""
        config_file = _write_config(tmp_path, "cache_dir: /from/file\n")

        settings = load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})

        assert settings.cache_dir == tmp_path

    def test_config_cache_dir_expands_user(self, tmp_path, isolated_home):
        config_file = _write_config(tmp_path, "cache_dir: ~/tools\n")

        settings = load_settings(config_file, environ={})

        assert settings.cache_dir == Path.home() / "tools"

    def test_empty_file(self, tmp_path):
        config_file = _write_config(tmp_path, "")

        settings = load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})

        assert settings == Settings(cache_dir=tmp_path)

    def test_invalid_yaml(self, tmp_path):
        config_file = _write_config(tmp_path, "versions: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(config_file, environ={})

    def test_top_level_not_mapping(self, tmp_path):
        config_file = _write_config(tmp_path, "- a\n- b\n")

        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_settings(config_file, environ={})

    @pytest.mark.parametrize("base_url", ["ftp://mirror", "mirror.local", "42"])
    def test_invalid_base_url(self, tmp_path, base_url):
        config_file = _write_config(tmp_path, f"base_url: {base_url}\n")

        with pytest.raises(ConfigError, match="base_url"):
            load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})

    def test_invalid_install_permitted(self, tmp_path):
        config_file = _write_config(tmp_path, "install_permitted: sometimes\n")

        with pytest.raises(ConfigError, match="install_permitted"):
            load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})

    def test_versions_not_mapping(self, tmp_path):
        config_file = _write_config(tmp_path, "versions: 0.9.1\n")

        with pytest.raises(ConfigError, match="versions must be a mapping"):
            load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})

    def test_float_version_rejected(self, tmp_path):
        """Test an unquoted two-part version is rejected."""
        config_file = _write_config(tmp_path, "versions:\n  wasm-pack: 1.0\n")

        with pytest.raises(ConfigError, match="Invalid version for wasm-pack"):
            load_settings(config_file, environ={"TOOLFETCH_CACHE": str(tmp_path)})
