################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import json
import sys
from io import StringIO
from unittest.mock import Mock

import pytest
from rich.console import Console

from wscreate import exceptions
from wscreate._base._projects import new_create_project_request
from wscreate._base.cli._ui import _presenters
from wscreate.schema.projects import CreateWorkspaceRequest, ProjectDefaults
from wscreate.schema.responses import ResponseStatusCode

from ...data.git import make_namespace, make_provider, make_repo


@pytest.fixture
def sys_exit_mock(monkeypatch):
    exit_mock = Mock()
    monkeypatch.setattr(sys, "exit", exit_mock)
    return exit_mock


CONSOLE_WIDTH = 120


@pytest.fixture
def test_console():
    return Console(file=StringIO(), width=CONSOLE_WIDTH)


@pytest.fixture
def request_():
    defaults = ProjectDefaults(image="ubuntu:22.04")
    return CreateWorkspaceRequest(
        name="widgets2",
        projects=[
            new_create_project_request(
                defaults, make_repo("widgets", branch="main"), "widgets"
            ),
            new_create_project_request(defaults, make_repo("gadgets"), "gadgets"),
        ],
    )


class TestWrappedOutputPresenter:
    @staticmethod
    def test_show_message(capsys):
        _presenters.WrappedOutputPresenter().show_message("<message sentinel>")

        captured = capsys.readouterr()
        assert "<message sentinel>" in captured.out

    @staticmethod
    def test_show_error(capsys, sys_exit_mock):
        exception = exceptions.NotFoundError("Repository not found")

        _presenters.WrappedOutputPresenter().show_error(exception)

        sys_exit_mock.assert_called_once_with(ResponseStatusCode.NOT_FOUND.value)
        assert "Repository not found" in capsys.readouterr().out


class TestCreationPresenter:
    @staticmethod
    def test_show_creation_request(test_console: Console, request_):
        # Given
        presenter = _presenters.CreationPresenter(console=test_console)

        # When
        presenter.show_creation_request(request_)

        # Then
        assert isinstance(test_console.file, StringIO)
        output = test_console.file.getvalue()
        assert "Workspace ready to be created!" in output
        assert "widgets2" in output
        assert "https://github.com/acme/widgets.git" in output
        assert "https://github.com/acme/gadgets.git" in output
        assert "main" in output
        assert "ubuntu:22.04" in output

    @staticmethod
    def test_show_projects(test_console: Console, request_):
        presenter = _presenters.CreationPresenter(console=test_console)

        presenter.show_projects(request_.projects)

        assert isinstance(test_console.file, StringIO)
        output = test_console.file.getvalue()
        assert "Project" in output
        assert "gadgets" in output

    @staticmethod
    def test_show_creation_request_json(capsys, request_):
        _presenters.CreationPresenter().show_creation_request_json(request_)

        printed = json.loads(capsys.readouterr().out)
        assert printed["name"] == "widgets2"
        assert [p["name"] for p in printed["projects"]] == ["widgets", "gadgets"]
        first = printed["projects"][0]
        assert first["source"]["repository"]["url"] == (
            "https://github.com/acme/widgets.git"
        )
        assert first["postStartCommands"] == []
        assert first["envVars"] == {}


class TestPromptPresenter:
    @staticmethod
    def test_providers_to_prompt():
        # Given
        github = make_provider("gh-1")
        gitlab = make_provider(
            "gl-1",
            providerId="gitlab",
            alias="work",
            baseApiUrl="https://gitlab.example.com/api/v4",
        )

        # When
        prompt = _presenters.PromptPresenter().providers_to_prompt([github, gitlab])

        # Then
        labels = [label for label, _ in prompt]
        assert [value for _, value in prompt] == [github, gitlab]
        assert labels[0].startswith("github (taylor)")
        assert labels[1].startswith("work")
        assert labels[1].endswith("https://gitlab.example.com/api/v4")
        # Columns are aligned
        assert labels[1].index("https://") >= len("github (taylor)")

    @staticmethod
    def test_namespaces_to_prompt():
        acme = make_namespace("acme", "ACME Corp")

        prompt = _presenters.PromptPresenter().namespaces_to_prompt([acme])

        assert prompt == [("ACME Corp", acme)]

    @staticmethod
    def test_repositories_to_prompt():
        # Given
        widgets, gadgets = make_repo("widgets"), make_repo("gadgets")

        # When
        prompt = _presenters.PromptPresenter().repositories_to_prompt(
            [widgets, gadgets]
        )

        # Then
        assert [value for _, value in prompt] == [widgets, gadgets]
        label = prompt[0][0]
        assert "widgets" in label
        assert "https://github.com/acme/widgets.git" in label
