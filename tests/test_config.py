from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Garante que o pacote userstore seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userstore.core import config as core_config  # noqa: E402


@pytest.fixture()
def fresh_settings(monkeypatch):
    for name in ("USERSTORE_FILE_MODE", "USERSTORE_LOG_LEVEL", "USERSTORE_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = core_config.get_settings()
    assert settings.file_mode == 0o644
    assert settings.log_level == logging.WARNING
    assert settings.encoding == "utf-8"


def test_reads_environment(fresh_settings):
    fresh_settings.setenv("USERSTORE_FILE_MODE", "600")
    fresh_settings.setenv("USERSTORE_LOG_LEVEL", "debug")
    fresh_settings.setenv("USERSTORE_ENCODING", "latin-1")
    settings = core_config.get_settings()
    assert settings.file_mode == 0o600
    assert settings.log_level == logging.DEBUG
    assert settings.encoding == "latin-1"


def test_invalid_values_fall_back(fresh_settings):
    fresh_settings.setenv("USERSTORE_FILE_MODE", "rw-r--r--")
    fresh_settings.setenv("USERSTORE_LOG_LEVEL", "chatty")
    fresh_settings.setenv("USERSTORE_ENCODING", "klingon-8")
    settings = core_config.get_settings()
    assert settings.file_mode == 0o644
    assert settings.log_level == logging.WARNING
    assert settings.encoding == "utf-8"
