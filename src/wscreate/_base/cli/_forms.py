################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Interactive forms used while collecting workspace creation data: typing in
repository URLs, deciding whether to add more projects, and the final submission.
"""
import re
import typing as t

from ... import exceptions
from ...schema.git import GitRepository
from ...schema.projects import CreateProjectRequest, ProjectDefaults
from .._naming import sanitize_project_name
from .._selection import SelectionTracker, repository_key
from . import _repos
from ._ui import _presenters, _prompts

# Sanitized project names contain no spaces, so suggestions derived from them pass.
WORKSPACE_NAME_REGEX = re.compile(r"^[^\s/\\]+$")


def _validate_repository_url(url: str) -> t.Optional[str]:
    if not url:
        return "Repository URL can't be empty."
    return None


def validate_workspace_name(
    name: str, existing_workspace_names: t.Collection[str]
) -> t.Optional[str]:
    """Returns the reason ``name`` can't be used, or None if it's fine."""
    if not name:
        return "Workspace name can't be empty."
    if not WORKSPACE_NAME_REGEX.match(name):
        return "Workspace name can't contain whitespace or slashes."
    if name in existing_workspace_names:
        return f"Workspace '{name}' already exists."
    return None


def _customized_project_name(name: str, current_name: t.Optional[str]) -> str:
    # current_name is sanitized already; decoding it again would change "+" and "%".
    if name == current_name:
        return name
    return sanitize_project_name(name)


def validate_project_name(
    name: str,
    other_names: t.Collection[str],
    current_name: t.Optional[str] = None,
) -> t.Optional[str]:
    """Returns the reason ``name`` can't be used, or None if it's fine.

    ``current_name`` is the project's name before editing. Keeping it is always
    allowed unless another project took it.
    """
    if not name:
        return "Project name can't be empty."
    try:
        sanitized = _customized_project_name(name, current_name)
    except exceptions.ProjectNameDecodeError as e:
        return e.message
    if sanitized in other_names:
        return f"Project '{sanitized}' is already part of this workspace."
    return None


class UrlRepositoryForm:
    def __init__(
        self,
        git_provider_repo=_repos.GitProviderRepo(),
        prompter=_prompts.Prompter(),
        presenter=_presenters.WrappedOutputPresenter(),
    ):
        self._git_provider_repo = git_provider_repo
        self._prompter = prompter
        self._presenter = presenter

    def prompt_repository(
        self, multi_project: bool, tracker: SelectionTracker
    ) -> GitRepository:
        """Asks for the URL of the first project's repository."""
        if multi_project:
            message = "Primary project repository URL"
        else:
            message = "Git repository URL"
        return self._prompt_unselected_repository(message, tracker)

    def prompt_additional_repository(
        self, slot: int, tracker: SelectionTracker
    ) -> t.Tuple[GitRepository, bool]:
        """Asks for the repository of project ``#slot``.

        Returns:
            The repository, and whether the user wants to add another project.
        """
        repository = self._prompt_unselected_repository(
            f"Project #{slot} repository URL", tracker
        )
        add_more = self._prompter.confirm("Add another project?", default=False)
        return repository, add_more

    def _prompt_unselected_repository(
        self, message: str, tracker: SelectionTracker
    ) -> GitRepository:
        while True:
            url = self._prompter.ask_for_str(
                message, validator=_validate_repository_url
            )
            repository = self._git_provider_repo.get_repository_from_url(url)
            if not tracker.is_repo_selected(repository_key(repository)):
                return repository

            self._presenter.show_message(
                f"Repository {repository.url} is already selected. "
                "Please choose another one."
            )


class AddMoreForm:
    def __init__(self, prompter=_prompts.Prompter()):
        self._prompter = prompter

    def run(self) -> bool:
        return self._prompter.confirm("Add another project?", default=False)


class SubmissionForm:
    """Last step before creating the workspace.

    Lets the user pick the workspace name and tweak the projects. ``projects`` is
    edited in place: customized projects replace the original list items.
    """

    def __init__(
        self,
        prompter=_prompts.Prompter(),
        presenter=_presenters.CreationPresenter(),
    ):
        self._prompter = prompter
        self._presenter = presenter

    def run(
        self,
        suggested_name: str,
        existing_workspace_names: t.Collection[str],
        projects: t.List[CreateProjectRequest],
        defaults: ProjectDefaults,
    ) -> str:
        """
        Returns:
            The workspace name chosen by the user.

        Raises:
            wscreate.exceptions.UserCancelledPrompt: when the user cancels a prompt or
                doesn't confirm the creation.
        """
        self._presenter.show_projects(projects)

        name = self._prompter.ask_for_str(
            "Workspace name",
            default=suggested_name,
            validator=lambda value: validate_workspace_name(
                value, existing_workspace_names
            ),
        )

        if self._prompter.confirm("Customize projects?", default=False):
            self._customize_projects(projects, defaults)
            self._presenter.show_projects(projects)

        if not self._prompter.confirm(
            f"Create workspace '{name}' with {len(projects)} project(s)?",
            default=True,
        ):
            raise exceptions.UserCancelledPrompt("User cancelled workspace creation")

        return name

    def _customize_projects(
        self, projects: t.List[CreateProjectRequest], defaults: ProjectDefaults
    ):
        for index, project in enumerate(projects):
            other_names = {p.name for i, p in enumerate(projects) if i != index}
            name = self._prompter.ask_for_str(
                f"Project #{index + 1} name",
                default=project.name,
                validator=lambda value, names=other_names, current=project.name: (
                    validate_project_name(value, names, current)
                ),
            )
            # An empty image falls back to the session's default image.
            image = self._prompter.ask_for_str(
                f"Project #{index + 1} image", default=project.image or ""
            )
            projects[index] = project.model_copy(
                update={
                    "name": _customized_project_name(name, project.name),
                    "image": image or defaults.image,
                }
            )
