"""
Tests for cache inspection.
"""

import pytest

from toolfetch.core.exceptions import CacheReadError
from toolfetch.core.version import Version
from toolfetch.install.inspector import CacheInspector


class TestInstalledVersions:
    """Tests for CacheInspector.installed_versions()."""

    def test_lists_parseable_entries(self, populated_cache):
        """Test unparseable entries are skipped silently."""
        inspector = CacheInspector(populated_cache)

        found = list(inspector.installed_versions("wasm-pack"))

        assert found == [(Version(0, 9, 1), populated_cache / "wasm-pack-0.9.1")]

    def test_other_tools_ignored(self, cache_dir):
        """Test entries of tools sharing a prefix do not match."""
        (cache_dir / "foo-1.0.0").mkdir()
        (cache_dir / "foo-bar-2.0.0").mkdir()
        (cache_dir / "foobar-3.0.0").mkdir()

        found = list(CacheInspector(cache_dir).installed_versions("foo"))

        assert found == [(Version(1, 0, 0), cache_dir / "foo-1.0.0")]

    def test_prerelease_entry(self, cache_dir):
        (cache_dir / "foo-1.0.0-rc.1").mkdir()

        found = list(CacheInspector(cache_dir).installed_versions("foo"))

        assert found == [(Version.parse("1.0.0-rc.1"), cache_dir / "foo-1.0.0-rc.1")]

    def test_missing_directory(self, tmp_path):
        """Test an unreadable cache raises CacheReadError."""
        inspector = CacheInspector(tmp_path / "missing")

        with pytest.raises(CacheReadError) as exc_info:
            list(inspector.installed_versions("foo"))

        assert str(tmp_path / "missing") in str(exc_info.value)


class TestFindInstalled:
    """Tests for CacheInspector.find_installed()."""

    def test_exact_match(self, populated_cache):
        inspector = CacheInspector(populated_cache)

        result = inspector.find_installed("cargo-generate", Version(0, 5, 0))

        assert result == (Version(0, 5, 0), populated_cache / "cargo-generate-0.5.0")

    def test_newer_version_not_matched(self, cache_dir):
        """Test only an equal version is reported."""
        (cache_dir / "foo-2.3.0").mkdir()

        assert CacheInspector(cache_dir).find_installed("foo", Version(2, 1, 0)) is None

    def test_build_metadata_equal(self, cache_dir):
        """Test build metadata does not prevent a match."""
        (cache_dir / "foo-1.0.0+linux").mkdir()

        result = CacheInspector(cache_dir).find_installed("foo", Version(1, 0, 0))

        assert result is not None
        assert result[1] == cache_dir / "foo-1.0.0+linux"

    def test_empty_cache(self, cache_dir):
        assert CacheInspector(cache_dir).find_installed("foo", Version(1, 0, 0)) is None

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CacheReadError):
            CacheInspector(tmp_path / "missing").find_installed("foo", Version(1, 0, 0))
