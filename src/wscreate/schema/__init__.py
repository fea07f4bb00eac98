################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
from .git import GitNamespace, GitProvider, GitRepository
from .projects import (
    CreateProjectRequest,
    CreateProjectSource,
    CreateWorkspaceRequest,
    ProjectBuild,
    ProjectDefaults,
)

__all__ = [
    "CreateProjectRequest",
    "CreateProjectSource",
    "CreateWorkspaceRequest",
    "GitNamespace",
    "GitProvider",
    "GitRepository",
    "ProjectBuild",
    "ProjectDefaults",
]
