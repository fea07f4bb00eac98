################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
from ._fs import get_config_file_path, read_config, read_project_defaults
from ._settings import ConfigFile, ServerConfig

__all__ = [
    "ConfigFile",
    "ServerConfig",
    "get_config_file_path",
    "read_config",
    "read_project_defaults",
]
