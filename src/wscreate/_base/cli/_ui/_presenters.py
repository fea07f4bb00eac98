################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Utilities for presenting human-readable text output from wscreate commands."""
import sys
import typing as t
from typing import Optional

import click
from rich.box import SIMPLE_HEAVY
from rich.console import Console
from rich.table import Table
from tabulate import tabulate

from ....schema.git import GitNamespace, GitProvider, GitRepository
from ....schema.projects import CreateProjectRequest, CreateWorkspaceRequest
from . import _errors


class RichPresenter:
    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()


class WrappedOutputPresenter:
    def show_error(self, exception: Exception):
        status_code = _errors.pretty_print_exception(exception)
        sys.exit(status_code.value)

    def show_message(self, message: str):
        click.echo(message=message)


def _projects_table(projects: t.Sequence[CreateProjectRequest]) -> Table:
    table = Table("#", "Project", "Repository", "Branch", "Image", box=SIMPLE_HEAVY)
    for index, project in enumerate(projects, start=1):
        repository = project.source.repository
        table.add_row(
            str(index),
            project.name,
            repository.url,
            repository.branch or "",
            project.image or "",
        )
    return table


class CreationPresenter(RichPresenter):
    def show_projects(self, projects: t.Sequence[CreateProjectRequest]):
        self._console.print(_projects_table(projects))

    def show_creation_request(self, request: CreateWorkspaceRequest):
        self._console.print(
            f"[green]Workspace ready to be created![/green] "
            f"Name: [bold]{request.name}[/bold]"
        )
        self._console.print(_projects_table(request.projects))

    def show_creation_request_json(self, request: CreateWorkspaceRequest):
        click.echo(request.model_dump_json(indent=2))


class PromptPresenter:
    # Labels are tabulated so that the columns line up in the prompt. There is an
    # expectation that labels correspond to the matching item list indices.

    def providers_to_prompt(
        self, providers: t.Sequence[GitProvider]
    ) -> t.List[t.Tuple[str, GitProvider]]:
        labels = [[p.label, p.baseApiUrl or ""] for p in providers]
        tabulated_labels = tabulate(labels, tablefmt="plain").split("\n")
        return list(zip(tabulated_labels, providers))

    def namespaces_to_prompt(
        self, namespaces: t.Sequence[GitNamespace]
    ) -> t.List[t.Tuple[str, GitNamespace]]:
        return [(ns.name, ns) for ns in namespaces]

    def repositories_to_prompt(
        self, repositories: t.Sequence[GitRepository]
    ) -> t.List[t.Tuple[str, GitRepository]]:
        labels = [[repo.name, repo.url] for repo in repositories]
        tabulated_labels = tabulate(labels, tablefmt="plain").split("\n")
        return list(zip(tabulated_labels, repositories))
