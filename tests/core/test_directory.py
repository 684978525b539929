"""
Tests for cache directory location.
"""

import os
from pathlib import Path

import pytest

from toolfetch.core.directory import get_cache_dir, get_default_cache_dir
from toolfetch.core.exceptions import DirectoryError


class TestGetCacheDir:
    """Tests for get_cache_dir()."""

    def test_env_override(self, tmp_path):
        """Test TOOLFETCH_CACHE replaces the default root."""
        override = tmp_path / "tools"
        assert get_cache_dir({"TOOLFETCH_CACHE": str(override)}) == override

    def test_env_override_expands_user(self, isolated_home):
        """Test ~ in the override is expanded."""
        result = get_cache_dir({"TOOLFETCH_CACHE": "~/tools"})
        assert result == Path.home() / "tools"

    def test_empty_override_ignored(self, isolated_home):
        """Test an empty variable falls back to the default."""
        assert get_cache_dir({"TOOLFETCH_CACHE": ""}) == get_default_cache_dir(
            {"USERPROFILE": str(isolated_home)}
        )

    @pytest.mark.skipif(os.name == "nt", reason="POSIX default location")
    def test_default_posix(self, isolated_home):
        """Test default root is ~/.toolfetch."""
        assert get_cache_dir({}) == isolated_home / ".toolfetch"

    def test_reads_os_environ_by_default(self, tmp_path, monkeypatch):
        """Test os.environ is consulted when no mapping is given."""
        monkeypatch.setenv("TOOLFETCH_CACHE", str(tmp_path))
        assert get_cache_dir() == tmp_path


@pytest.mark.skipif(os.name != "nt", reason="Windows default location")
class TestDefaultCacheDirWindows:
    """Tests for the Windows default location."""

    def test_uses_userprofile(self):
        """Test USERPROFILE is the Windows base directory."""
        result = get_default_cache_dir({"USERPROFILE": "C:\\Users\\dev"})
        assert result == Path("C:\\Users\\dev") / ".toolfetch"

    def test_missing_userprofile(self):
        """Test a missing USERPROFILE raises DirectoryError."""
        with pytest.raises(DirectoryError, match="USERPROFILE"):
            get_default_cache_dir({})
