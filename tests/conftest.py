"""Pytest configuration and shared fixtures for DIGIPIN tests."""

import os

import pytest

from core.config import AppSettings
from core.services.codec import GridCodec
from core.services.digipin import DigipinService

DELHI = (28.6139, 77.2090)
MUMBAI = (19.0760, 72.8777)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user/project .env files and DIGIPIN_* variables out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("DIGIPIN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def service(settings):
    return DigipinService(settings)


@pytest.fixture
def codec():
    return GridCodec()


@pytest.fixture
def delhi_cell(service):
    return service.encode(*DELHI).unwrap()
