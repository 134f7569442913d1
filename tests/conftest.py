"""
Test configuration and fixtures for bootenv
"""

from pathlib import Path

import pytest

from bootenv.config import ConfigAccessor, HostInfo, PropertyStore, StaticEnvironment
from bootenv.logging import reset_logger


@pytest.fixture
def fake_env():
    """Deterministic environment variables"""
    return {
        "PATH": "/usr/bin:/bin",
        "LANG": "en_US.UTF-8",
        "BOOT_VERSION": "2.8.3",
    }


@pytest.fixture
def home_dir(tmp_path) -> Path:
    home = tmp_path / "home" / "u"
    home.mkdir(parents=True)
    return home.resolve()


@pytest.fixture
def linux_host(home_dir):
    return HostInfo(os_name="Linux", user_home=home_dir)


@pytest.fixture
def properties():
    return PropertyStore()


@pytest.fixture
def accessor(fake_env, properties, linux_host):
    """Accessor wired entirely to fakes"""
    return ConfigAccessor(
        environment=StaticEnvironment(fake_env),
        properties=properties,
        host=linux_host,
    )


@pytest.fixture(autouse=True)
def clean_loggers():
    yield
    reset_logger()
