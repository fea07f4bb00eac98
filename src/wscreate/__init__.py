################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Interactive collection of workspace creation data."""

from . import exceptions
from ._base._naming import (
    get_project_name_from_repo,
    get_suggested_workspace_name,
    sanitize_project_name,
)
from ._base._projects import new_create_project_request
from ._base._selection import SelectionTracker, repository_key
from ._base.cli._workspace._create import CreateDataPromptConfig, CreationOrchestrator
from .schema import (
    CreateProjectRequest,
    CreateWorkspaceRequest,
    GitNamespace,
    GitProvider,
    GitRepository,
    ProjectBuild,
    ProjectDefaults,
)

__all__ = [
    "CreateDataPromptConfig",
    "CreateProjectRequest",
    "CreateWorkspaceRequest",
    "CreationOrchestrator",
    "GitNamespace",
    "GitProvider",
    "GitRepository",
    "ProjectBuild",
    "ProjectDefaults",
    "SelectionTracker",
    "exceptions",
    "get_project_name_from_repo",
    "get_suggested_workspace_name",
    "new_create_project_request",
    "repository_key",
    "sanitize_project_name",
]
