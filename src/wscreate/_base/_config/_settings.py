################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import typing as t

from pydantic import BaseModel, Field

from ...schema.projects import ProjectDefaults

CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_NAME = ".wscreate"
CONFIG_FILE_CURRENT_VERSION = "0.0.1"


class ServerConfig(BaseModel):
    api_url: t.Optional[str] = None
    token: t.Optional[str] = None


class ConfigFile(BaseModel):
    version: str = CONFIG_FILE_CURRENT_VERSION
    server: ServerConfig = Field(default_factory=ServerConfig)
    project_defaults: ProjectDefaults = Field(default_factory=ProjectDefaults)


DEFAULT_CONFIG_FILE = ConfigFile()
