################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Models describing the workspace creation request."""
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from .git import GitRepository


class ProjectDefaults(BaseModel):
    """Settings applied to every project created in a session."""

    model_config = ConfigDict(frozen=True)

    image: t.Optional[str] = None
    imageUser: t.Optional[str] = None
    postStartCommands: t.List[str] = Field(default_factory=list)


class DevcontainerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    filePath: str


class ProjectBuild(BaseModel):
    """Build descriptor. Empty means "use the project image as is"."""

    model_config = ConfigDict(frozen=True)

    devcontainer: t.Optional[DevcontainerConfig] = None


class CreateProjectSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    repository: GitRepository


class CreateProjectRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    source: CreateProjectSource
    build: ProjectBuild = Field(default_factory=ProjectBuild)
    image: t.Optional[str] = None
    user: t.Optional[str] = None
    postStartCommands: t.List[str] = Field(default_factory=list)
    envVars: t.Dict[str, str] = Field(default_factory=dict)


class CreateWorkspaceRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    projects: t.List[CreateProjectRequest]


class WorkspaceSummary(BaseModel):
    """The part of a workspace listing needed to keep names unique."""

    id: str = ""
    name: str
