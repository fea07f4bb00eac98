################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
from ..schema.git import GitRepository
from ..schema.projects import (
    CreateProjectRequest,
    CreateProjectSource,
    ProjectBuild,
    ProjectDefaults,
)


def new_create_project_request(
    defaults: ProjectDefaults, repository: GitRepository, name: str
) -> CreateProjectRequest:
    """Builds the request for a single project using the session's defaults."""
    return CreateProjectRequest(
        name=name,
        source=CreateProjectSource(repository=repository),
        build=ProjectBuild(),
        image=defaults.image,
        user=defaults.imageUser,
        postStartCommands=list(defaults.postStartCommands),
        envVars={},
    )
