################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Code for 'wscreate create'."""
import logging
import typing as t
from dataclasses import dataclass, field

from ....schema.git import GitProvider, GitRepository
from ....schema.projects import (
    CreateProjectRequest,
    CreateWorkspaceRequest,
    ProjectDefaults,
)
from ..._naming import get_suggested_workspace_name, sanitize_project_name
from ..._projects import new_create_project_request
from ..._selection import SelectionTracker
from .. import _acquire, _forms, _repos
from .._ui import _presenters, _prompts

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateDataPromptConfig:
    existing_workspace_names: t.Sequence[str]
    git_providers: t.Sequence[GitProvider]
    manual: bool
    multi_project: bool
    defaults: ProjectDefaults = field(default_factory=ProjectDefaults)


class CreationOrchestrator:
    """Collects the workspace name and its projects from the user.

    The flow is::

        first project -> more projects (while the user wants) -> naming -> submission

    Each call to ``get_creation_data`` is a separate session with its own
    ``SelectionTracker``. Any error aborts the whole session; no partial project
    list is ever returned.
    """

    def __init__(
        self,
        prompter: t.Optional[_prompts.Prompter] = None,
        git_provider_repo: t.Optional[_repos.GitProviderRepo] = None,
        wizard: t.Optional[_acquire.ProviderWizard] = None,
        url_form: t.Optional[_forms.UrlRepositoryForm] = None,
        add_more_form: t.Optional[_forms.AddMoreForm] = None,
        submission_form: t.Optional[_forms.SubmissionForm] = None,
    ):
        prompter = prompter or _prompts.Prompter()
        git_provider_repo = git_provider_repo or _repos.GitProviderRepo()

        self._wizard = wizard or _acquire.ProviderWizard(
            git_provider_repo=git_provider_repo, prompter=prompter
        )
        self._url_form = url_form or _forms.UrlRepositoryForm(
            git_provider_repo=git_provider_repo, prompter=prompter
        )
        self._add_more_form = add_more_form or _forms.AddMoreForm(prompter=prompter)
        self._submission_form = submission_form or _forms.SubmissionForm(
            prompter=prompter
        )

    def get_creation_data(
        self, config: CreateDataPromptConfig
    ) -> t.Tuple[str, t.List[CreateProjectRequest]]:
        """
        Returns:
            The workspace name and the list of project requests.

        Raises:
            wscreate.exceptions.ProjectNameDecodeError: when a repository name can't
                be turned into a project name.
            wscreate.exceptions.ProviderError: when talking to the server fails.
            wscreate.exceptions.PromptError: when collecting user input fails.
        """
        tracker = SelectionTracker()
        acquirer = _acquire.RepositoryAcquirer(
            providers=config.git_providers,
            manual=config.manual,
            multi_project=config.multi_project,
            wizard=self._wizard,
            url_form=self._url_form,
            add_more_form=self._add_more_form,
        )

        slot = 1
        acquisition = acquirer.acquire(slot, tracker)
        projects = [self._new_project(config, acquisition.repository)]

        while acquisition.add_more:
            slot += 1
            acquisition = acquirer.acquire(slot, tracker)
            projects.append(self._new_project(config, acquisition.repository))

        LOG.debug("Collected %s project(s)", len(projects))

        suggested_name = get_suggested_workspace_name(
            projects[0].name, config.existing_workspace_names
        )
        workspace_name = self._submission_form.run(
            suggested_name,
            list(config.existing_workspace_names),
            projects,
            config.defaults,
        )

        return workspace_name, projects

    @staticmethod
    def _new_project(
        config: CreateDataPromptConfig, repository: GitRepository
    ) -> CreateProjectRequest:
        name = sanitize_project_name(repository.name)
        return new_create_project_request(config.defaults, repository, name)


class Action:
    """Encapsulates app-related logic for handling ``wscreate create``.

    It's the glue code that connects reading data, running the interactive
    collection, and presenting the results back to the user.

    The module is considered part of the name, so this class should be read as
    ``_workspace._create.Action``.
    """

    def __init__(
        self,
        presenter=_presenters.CreationPresenter(),
        error_presenter=_presenters.WrappedOutputPresenter(),
        git_provider_repo=_repos.GitProviderRepo(),
        workspace_repo=_repos.WorkspaceRepo(),
        config_repo=_repos.ConfigRepo(),
        orchestrator: t.Optional[CreationOrchestrator] = None,
    ):
        # text IO
        self._presenter = presenter
        self._error_presenter = error_presenter

        # data sources
        self._git_provider_repo = git_provider_repo
        self._workspace_repo = workspace_repo
        self._config_repo = config_repo

        self._orchestrator = orchestrator or CreationOrchestrator(
            git_provider_repo=git_provider_repo
        )

    def on_cmd_call(self, manual: bool, multi_project: bool, output_json: bool):
        try:
            self._on_cmd_call_with_exceptions(manual, multi_project, output_json)
        except Exception as e:
            self._error_presenter.show_error(e)

    def _on_cmd_call_with_exceptions(
        self, manual: bool, multi_project: bool, output_json: bool
    ):
        """Implementation of the command action. Doesn't catch exceptions."""
        defaults = self._config_repo.read_project_defaults()
        existing_names = self._workspace_repo.list_workspace_names()

        # Manual mode never browses providers, so there's no need to list them.
        providers = [] if manual else self._git_provider_repo.list_git_providers()

        config = CreateDataPromptConfig(
            existing_workspace_names=existing_names,
            git_providers=providers,
            manual=manual,
            multi_project=multi_project,
            defaults=defaults,
        )
        name, projects = self._orchestrator.get_creation_data(config)

        request = CreateWorkspaceRequest(name=name, projects=projects)
        if output_json:
            self._presenter.show_creation_request_json(request)
        else:
            self._presenter.show_creation_request(request)
