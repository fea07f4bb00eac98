################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import pytest
from pydantic import ValidationError

from wscreate._base._projects import new_create_project_request
from wscreate.schema.projects import ProjectBuild, ProjectDefaults

from .data.git import make_repo


class TestNewCreateProjectRequest:
    @staticmethod
    def test_applies_defaults():
        # Given
        defaults = ProjectDefaults(
            image="ubuntu:22.04",
            imageUser="dev",
            postStartCommands=["make setup"],
        )
        repo = make_repo("widgets")

        # When
        project = new_create_project_request(defaults, repo, "widgets")

        # Then
        assert project.name == "widgets"
        assert project.source.repository == repo
        assert project.build == ProjectBuild()
        assert project.image == "ubuntu:22.04"
        assert project.user == "dev"
        assert project.postStartCommands == ["make setup"]
        assert project.envVars == {}

    @staticmethod
    def test_empty_defaults():
        project = new_create_project_request(
            ProjectDefaults(), make_repo("widgets"), "widgets"
        )

        assert project.image is None
        assert project.user is None
        assert project.postStartCommands == []

    @staticmethod
    def test_commands_arent_shared_with_defaults():
        defaults = ProjectDefaults(postStartCommands=["make setup"])

        project = new_create_project_request(defaults, make_repo("a"), "a")

        assert project.postStartCommands is not defaults.postStartCommands

    @staticmethod
    def test_request_is_immutable():
        project = new_create_project_request(
            ProjectDefaults(), make_repo("widgets"), "widgets"
        )

        with pytest.raises(ValidationError):
            project.name = "other"  # type: ignore
