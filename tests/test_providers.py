"""
Tests for environment and host providers
"""

from dataclasses import FrozenInstanceError
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bootenv.config.providers import (
    HostInfo,
    OsEnvironment,
    StaticEnvironment,
    java_style_os_name,
    resolve_user_home,
)
from bootenv.core.errors import EnvError


class TestOsEnvironment:
    def test_snapshot_is_copy(self):
        with patch.dict(os.environ, {"BOOTENV_A": "1"}, clear=True):
            env = OsEnvironment()
            snapshot = env.snapshot()
            snapshot["BOOTENV_B"] = "2"
            assert "BOOTENV_B" not in os.environ
            assert env.snapshot() == {"BOOTENV_A": "1"}

    def test_get(self):
        with patch.dict(os.environ, {"BOOTENV_A": "1"}, clear=True):
            env = OsEnvironment()
            assert env.get("BOOTENV_A") == "1"
            assert env.get("BOOTENV_MISSING") is None


class TestStaticEnvironment:
    def test_copies_input(self):
        source = {"A": "1"}
        env = StaticEnvironment(source)
        source["A"] = "changed"
        assert env.get("A") == "1"

    def test_empty_by_default(self):
        assert StaticEnvironment().snapshot() == {}

    def test_snapshot_is_copy(self):
        env = StaticEnvironment({"A": "1"})
        env.snapshot()["A"] = "2"
        assert env.get("A") == "1"


class TestOsName:
    """Test JVM-style platform naming"""

    def test_darwin_is_mac(self):
        assert java_style_os_name("Darwin") == "Mac OS X"

    def test_windows_includes_release(self):
        assert java_style_os_name("Windows", "10") == "Windows 10"

    def test_windows_without_release(self):
        assert java_style_os_name("Windows", "") == "Windows"

    def test_linux_passes_through(self):
        assert java_style_os_name("Linux") == "Linux"

    def test_uses_platform_module(self):
        with patch("bootenv.config.providers.platform.system", return_value="Windows"), patch(
            "bootenv.config.providers.platform.release", return_value="11"
        ):
            assert java_style_os_name() == "Windows 11"


class TestHostInfo:
    def test_home_uses_injected_value(self, tmp_path):
        host = HostInfo(os_name="Linux", user_home=tmp_path)
        assert host.home() == tmp_path

    def test_home_falls_back_to_os(self):
        with patch("bootenv.config.providers.Path.home", return_value=Path("/home/u")):
            assert HostInfo(os_name="Linux").home() == Path("/home/u")

    def test_detect(self):
        with patch("bootenv.config.providers.platform.system", return_value="Linux"):
            host = HostInfo.detect()
        assert host.os_name == "Linux"
        assert host.user_home is None

    def test_frozen(self, tmp_path):
        host = HostInfo(os_name="Linux", user_home=tmp_path)
        with pytest.raises(FrozenInstanceError):
            host.os_name = "Windows 10"


class TestResolveUserHome:
    @pytest.mark.parametrize("error", [RuntimeError("no home"), KeyError("HOME")])
    def test_failure_raises_env_error(self, error):
        with patch("bootenv.config.providers.Path.home", side_effect=error):
            with pytest.raises(EnvError) as exc_info:
                resolve_user_home()
        assert exc_info.value.__cause__ is error
        assert "cause" in exc_info.value.context
