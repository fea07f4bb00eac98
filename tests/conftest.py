################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Pytest's requirement to share fixtures across test files.
"""
from pathlib import Path

import pytest

from wscreate._base import _env


@pytest.fixture
def config_path(tmp_path, monkeypatch) -> Path:
    """
    Makes wscreate read its config file from a temporary directory. The server
    env overrides are cleared so that the file is the only source.
    """
    path = tmp_path / "config.json"
    monkeypatch.setenv(_env.CONFIG_PATH_ENV, str(path))
    monkeypatch.delenv(_env.API_URL_ENV, raising=False)
    monkeypatch.delenv(_env.API_TOKEN_ENV, raising=False)
    return path
