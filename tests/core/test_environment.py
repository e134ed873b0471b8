"""
Unit tests for environment sources and WrapperConfig.
"""

from pathlib import Path

from cargo_android.core.environment import (
    MappingEnvironment,
    OsEnvironment,
    WrapperConfig,
    as_text,
)
from cargo_android.core.platform import HostPlatform


class TestMappingEnvironment:
    """Tests for MappingEnvironment."""

    def test_get(self):
        env = MappingEnvironment({"A": "1"})
        assert env.get("A") == "1"
        assert env.get("B") is None

    def test_as_dict_is_a_copy(self):
        values = {"A": "1"}
        env = MappingEnvironment(values)

        snapshot = env.as_dict()
        snapshot["B"] = "2"

        assert env.get("B") is None
        assert values == {"A": "1"}

    def test_empty(self):
        assert MappingEnvironment().as_dict() == {}


class TestOsEnvironment:
    """Tests for OsEnvironment."""

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CARGO_ANDROID_TEST_VAR", "value")
        env = OsEnvironment()

        assert env.get("CARGO_ANDROID_TEST_VAR") == "value"
        assert env.as_dict()["CARGO_ANDROID_TEST_VAR"] == "value"

    def test_missing_variable(self, monkeypatch):
        monkeypatch.delenv("CARGO_ANDROID_TEST_VAR", raising=False)
        assert OsEnvironment().get("CARGO_ANDROID_TEST_VAR") is None


class TestAsText:
    """Tests for as_text()."""

    def test_none(self):
        assert as_text(None) is None

    def test_valid_text(self):
        assert as_text("-C opt-level=3") == "-C opt-level=3"

    def test_surrogate_escaped_value(self):
        """Test that undecodable bytes from os.environ are rejected."""
        assert as_text("bad\udcff") is None


class TestWrapperConfig:
    """Tests for WrapperConfig.from_source()."""

    def test_all_variables(self):
        source = MappingEnvironment(
            {
                "ANDROID_NDK_ROOT": "/opt/android-ndk",
                "ANDROID_API": "30",
                "CARGO": "/usr/bin/cargo",
                "CARGO_ENCODED_RUSTFLAGS": "-Cdebuginfo=2",
                "RUSTFLAGS": "-C opt-level=3",
                "CARGO_ANDROID_LOG": "debug",
            }
        )

        config = WrapperConfig.from_source(source, host=HostPlatform.LINUX)

        assert config.host is HostPlatform.LINUX
        assert config.ndk_root == Path("/opt/android-ndk")
        assert config.api_override == "30"
        assert config.driver == "/usr/bin/cargo"
        assert config.encoded_rustflags == "-Cdebuginfo=2"
        assert config.rustflags == "-C opt-level=3"
        assert config.log_level == "debug"

    def test_empty_environment(self):
        config = WrapperConfig.from_source(MappingEnvironment(), host=HostPlatform.MACOS)

        assert config.host is HostPlatform.MACOS
        assert config.ndk_root is None
        assert config.api_override is None
        assert config.driver is None
        assert config.encoded_rustflags is None
        assert config.rustflags is None

    def test_non_text_rustflags_treated_as_unset(self):
        source = MappingEnvironment(
            {"CARGO_ENCODED_RUSTFLAGS": "bad\udcff", "RUSTFLAGS": "-g"}
        )

        config = WrapperConfig.from_source(source, host=HostPlatform.LINUX)

        assert config.encoded_rustflags is None
        assert config.rustflags == "-g"

    def test_api_override_kept_raw(self):
        """Test that ANDROID_API is validated by the resolver, not here."""
        source = MappingEnvironment({"ANDROID_API": "latest"})
        config = WrapperConfig.from_source(source, host=HostPlatform.LINUX)
        assert config.api_override == "latest"
