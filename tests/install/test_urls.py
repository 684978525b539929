"""
Tests for prebuilt archive URL construction.
"""

import pytest
from unittest.mock import patch

from toolfetch.core.platform import TargetTriple
from toolfetch.core.version import Version
from toolfetch.install.urls import build_url, legacy_url, prebuilt_url


class TestBuildUrl:
    """Tests for build_url()."""

    @pytest.mark.parametrize(
        "target",
        [
            TargetTriple.LINUX_X86_64,
            TargetTriple.MACOS_X86_64,
            TargetTriple.WINDOWS_X86_64,
        ],
    )
    def test_general_endpoint(self, target):
        """Test native targets use the get-binary endpoint."""
        url = build_url("wasm-pack", "rustwasm", "0.9.1", target)
        assert url == (
            "https://workers.cloudflare.com/get-binary/rustwasm/wasm-pack"
            f"/v0.9.1/{target.value}.tar.gz"
        )

    def test_override_endpoint(self, capsys):
        """Test aarch64 macOS always uses the override endpoint."""
        url = build_url("wasm-pack", "rustwasm", "0.9.1", TargetTriple.MACOS_AARCH64)

        assert url == (
            "https://workers.cloudflare.com/get-override/rustwasm/wasm-pack"
            "/v0.9.1/aarch64-apple-darwin.tar.gz"
        )
        assert f"sent to override URL: {url}" in capsys.readouterr().out

    def test_general_endpoint_prints_nothing(self, capsys):
        build_url("wasm-pack", "rustwasm", "0.9.1", TargetTriple.LINUX_X86_64)
        assert capsys.readouterr().out == ""

    def test_accepts_target_string(self):
        url = build_url("cargo-generate", "ashleygwilliams", "0.5.0", "x86_64-apple-darwin")
        assert url.endswith("/get-binary/ashleygwilliams/cargo-generate/v0.5.0/x86_64-apple-darwin.tar.gz")

    def test_unknown_target_rejected(self):
        with pytest.raises(ValueError):
            build_url("wasm-pack", "rustwasm", "0.9.1", "riscv64-unknown-linux-gnu")

    def test_version_object(self):
        """Test Version instances render with their canonical string."""
        url = build_url("wasm-pack", "rustwasm", Version.parse("1.0.0-rc.1"), TargetTriple.LINUX_X86_64)
        assert "/v1.0.0-rc.1/" in url

    def test_custom_base_url(self):
        url = build_url(
            "wasm-pack", "rustwasm", "0.9.1", TargetTriple.LINUX_X86_64, "http://localhost:8080/"
        )
        assert url.startswith("http://localhost:8080/get-binary/")

    @pytest.mark.parametrize("target", list(TargetTriple))
    def test_legacy_tool_ignores_owner_and_target(self, target):
        """Test the legacy tool URL depends only on its version."""
        url = build_url("wranglerjs", "anyone", "1.19.0", target)
        assert url == "https://workers.cloudflare.com/get-wranglerjs-binary/wranglerjs/v1.19.0.tar.gz"


class TestPrebuiltUrl:
    """Tests for prebuilt_url()."""

    def test_explicit_target(self):
        url = prebuilt_url("wasm-pack", "rustwasm", "0.9.1", TargetTriple.LINUX_X86_64)
        assert url.endswith("/x86_64-unknown-linux-musl.tar.gz")

    @patch("toolfetch.install.urls.resolve_target", return_value=TargetTriple.MACOS_X86_64)
    def test_host_target(self, mock_resolve):
        url = prebuilt_url("wasm-pack", "rustwasm", "0.9.1")
        assert url.endswith("/x86_64-apple-darwin.tar.gz")
        mock_resolve.assert_called_once_with()

    @patch("toolfetch.install.urls.resolve_target", return_value=None)
    def test_unsupported_host(self, mock_resolve):
        """Test unsupported hosts produce no URL."""
        assert prebuilt_url("wasm-pack", "rustwasm", "0.9.1") is None

    @patch("toolfetch.install.urls.resolve_target", return_value=None)
    def test_legacy_tool_on_unsupported_host(self, mock_resolve):
        """Test the legacy tool never consults the platform."""
        assert prebuilt_url("wranglerjs", "", "1.19.0") == legacy_url("wranglerjs", "1.19.0")
        mock_resolve.assert_not_called()
