################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""This is the internal module for loading the ``wscreate`` configuration."""
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ... import exceptions
from ...schema.projects import ProjectDefaults
from .._env import API_TOKEN_ENV, API_URL_ENV, CONFIG_PATH_ENV
from . import _settings

LOG = logging.getLogger(__name__)


def get_config_file_path() -> Path:
    """Get the absolute path to the config file.

    Returns:
        Path: Path to the configuration file. The default is `~/.wscreate/config.json`
            but can be configured using the `WSCREATE_CONFIG_PATH` environment
            variable.
    """
    config_file_path = os.getenv(CONFIG_PATH_ENV)
    if config_file_path is not None:
        return Path(config_file_path).resolve()

    return Path.home() / _settings.CONFIG_DIR_NAME / _settings.CONFIG_FILE_NAME


def _open_config_file() -> _settings.ConfigFile:
    config_file = get_config_file_path()
    if not config_file.exists():
        raise exceptions.ConfigFileNotFoundError(
            f"Config file {config_file} not found."
        )
    data: str = config_file.read_text()
    try:
        return _settings.ConfigFile.model_validate_json(data)
    except ValidationError as e:
        raise exceptions.InvalidConfigError(
            f"Config file {config_file} is invalid:\n{e}"
        ) from e


def read_config() -> _settings.ConfigFile:
    """Reads the config file, applying environment overrides.

    A missing file isn't an error; the built-in defaults are used instead.

    Raises:
        wscreate.exceptions.InvalidConfigError: when the file exists but can't be
            parsed.
    """
    try:
        config = _open_config_file()
    except exceptions.ConfigFileNotFoundError:
        LOG.debug("No config file at %s, using defaults", get_config_file_path())
        config = _settings.DEFAULT_CONFIG_FILE

    server_overrides = {}
    if (api_url := os.getenv(API_URL_ENV)) is not None:
        server_overrides["api_url"] = api_url
    if (token := os.getenv(API_TOKEN_ENV)) is not None:
        server_overrides["token"] = token

    if server_overrides:
        config = config.model_copy(
            update={"server": config.server.model_copy(update=server_overrides)}
        )

    return config


def read_project_defaults() -> ProjectDefaults:
    return read_config().project_defaults
