"""
Unit tests for host platform detection.
"""

import pytest
from unittest.mock import patch

from cargo_android.core.exceptions import UnsupportedHostError
from cargo_android.core.platform import HostPlatform, detect_host


@pytest.fixture(autouse=True)
def clear_detection_cache():
    """Clear the detect_host cache around each test."""
    detect_host.cache_clear()
    yield
    detect_host.cache_clear()


class TestHostPlatform:
    """Tests for HostPlatform conventions."""

    def test_linux(self):
        host = HostPlatform.LINUX
        assert host.prebuilt_dir == "linux-x86_64"
        assert host.exe_suffix == ""
        assert host.clang_suffix == ""
        assert host.supports_signals is True

    def test_macos(self):
        host = HostPlatform.MACOS
        assert host.prebuilt_dir == "darwin-x86_64"
        assert host.exe_suffix == ""
        assert host.clang_suffix == ""
        assert host.supports_signals is True

    def test_windows(self):
        host = HostPlatform.WINDOWS
        assert host.prebuilt_dir == "windows-x86_64"
        assert host.exe_suffix == ".exe"
        assert host.clang_suffix == ".cmd"
        assert host.supports_signals is False

    def test_members_are_distinct(self):
        """Test that no host family aliases another."""
        assert len(list(HostPlatform)) == 3


class TestDetectHost:
    """Tests for detect_host()."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("Linux", HostPlatform.LINUX),
            ("Darwin", HostPlatform.MACOS),
            ("Windows", HostPlatform.WINDOWS),
        ],
    )
    def test_known_systems(self, system, expected):
        with patch("platform.system", return_value=system):
            assert detect_host() is expected

    def test_unsupported_system(self):
        with patch("platform.system", return_value="FreeBSD"):
            with pytest.raises(UnsupportedHostError, match="freebsd"):
                detect_host()

    def test_detection_is_cached(self):
        with patch("platform.system", return_value="Linux") as mock_system:
            detect_host()
            detect_host()

        assert mock_system.call_count == 1
