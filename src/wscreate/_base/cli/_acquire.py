################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Acquiring the repository for a single project slot.

A slot is filled either by browsing the user's git providers ("wizard") or by
typing in a repository URL ("manual"). Browsing consults the session's
``SelectionTracker`` so that nothing can be picked twice, and disables namespaces and
providers as they become exhausted.
"""
import enum
import logging
import typing as t
from dataclasses import dataclass

from ...schema.git import GitNamespace, GitProvider, GitRepository
from .._selection import SelectionTracker, repository_key
from . import _forms, _repos
from ._ui import _presenters, _prompts

LOG = logging.getLogger(__name__)

CUSTOM_REPO_LABEL = "Enter a custom repository URL"


class AcquisitionMode(enum.Enum):
    WIZARD = "wizard"
    MANUAL = "manual"


@dataclass(frozen=True)
class RepositoryPicked:
    repository: GitRepository


@dataclass(frozen=True)
class NothingPicked:
    """The wizard finished without a repository. This isn't an error."""

    reason: str


BrowseOutcome = t.Union[RepositoryPicked, NothingPicked]


@dataclass(frozen=True)
class Acquisition:
    repository: GitRepository
    add_more: bool
    "Whether the user wants another project slot after this one"


def _for_slot(message: str, slot: int) -> str:
    if slot > 1:
        return f"{message} for project #{slot}"
    return message


class ProviderWizard:
    """Browses providers -> namespaces -> repositories, skipping exhausted ones."""

    def __init__(
        self,
        git_provider_repo=_repos.GitProviderRepo(),
        prompter=_prompts.Prompter(),
        presenter=_presenters.PromptPresenter(),
    ):
        self._git_provider_repo = git_provider_repo
        self._prompter = prompter
        self._presenter = presenter

    def browse(
        self,
        providers: t.Sequence[GitProvider],
        slot: int,
        tracker: SelectionTracker,
    ) -> BrowseOutcome:
        available_providers = [
            p for p in providers if not tracker.is_provider_disabled(p.id)
        ]
        if not available_providers:
            return NothingPicked("all git providers are exhausted")

        provider_choices: t.List[t.Tuple[str, t.Optional[GitProvider]]] = []
        provider_choices.extend(self._presenter.providers_to_prompt(available_providers))
        provider_choices.append((CUSTOM_REPO_LABEL, None))
        provider = self._prompter.choice(
            provider_choices, message=_for_slot("Git provider", slot)
        )
        if provider is None:
            return NothingPicked("custom repository URL requested")

        namespaces = self._git_provider_repo.list_namespaces(provider.id)
        namespace = self._pick_namespace(provider, namespaces, slot, tracker)
        if namespace is None:
            return NothingPicked(f"no namespaces left under {provider.label}")

        repositories = self._git_provider_repo.list_repositories(
            provider.id, namespace.id
        )
        available_repos = [
            repo
            for repo in repositories
            if not tracker.is_repo_selected(repository_key(repo))
        ]
        if not available_repos:
            self._update_exhaustion(
                provider, namespaces, namespace, repositories, tracker
            )
            return NothingPicked(f"no repositories left under {namespace.name}")

        repository = self._prompter.choice(
            self._presenter.repositories_to_prompt(available_repos),
            message=_for_slot("Repository", slot),
        )
        tracker.mark_selected(repository_key(repository))
        self._update_exhaustion(provider, namespaces, namespace, repositories, tracker)

        return RepositoryPicked(repository)

    def _pick_namespace(
        self,
        provider: GitProvider,
        namespaces: t.Sequence[GitNamespace],
        slot: int,
        tracker: SelectionTracker,
    ) -> t.Optional[GitNamespace]:
        available = [
            ns
            for ns in namespaces
            if not tracker.is_namespace_disabled(provider.id, ns.id)
        ]
        if not available:
            tracker.disable_provider(provider.id)
            return None

        # A provider without organizations lists just the user's own namespace.
        # There's nothing to choose from.
        if len(namespaces) == 1:
            return available[0]

        return self._prompter.choice(
            self._presenter.namespaces_to_prompt(available),
            message=_for_slot("Namespace", slot),
        )

    @staticmethod
    def _update_exhaustion(
        provider: GitProvider,
        namespaces: t.Sequence[GitNamespace],
        namespace: GitNamespace,
        repositories: t.Sequence[GitRepository],
        tracker: SelectionTracker,
    ):
        if all(tracker.is_repo_selected(repository_key(r)) for r in repositories):
            tracker.disable_namespace(provider.id, namespace.id)

        if all(tracker.is_namespace_disabled(provider.id, ns.id) for ns in namespaces):
            tracker.disable_provider(provider.id)


class RepositoryAcquirer:
    """Fills project slots for one session.

    Slot 1 is the mandatory first project. For later slots the user also decides
    whether to continue adding projects.
    """

    def __init__(
        self,
        providers: t.Sequence[GitProvider],
        manual: bool,
        multi_project: bool,
        wizard: ProviderWizard,
        url_form: _forms.UrlRepositoryForm,
        add_more_form: _forms.AddMoreForm,
    ):
        self._providers = list(providers)
        self._manual = manual
        self._multi_project = multi_project
        self._wizard = wizard
        self._url_form = url_form
        self._add_more_form = add_more_form

    def resolve_mode(self, tracker: SelectionTracker) -> AcquisitionMode:
        if self._manual or not self._providers:
            return AcquisitionMode.MANUAL

        if all(tracker.is_provider_disabled(p.id) for p in self._providers):
            return AcquisitionMode.MANUAL

        return AcquisitionMode.WIZARD

    def acquire(self, slot: int, tracker: SelectionTracker) -> Acquisition:
        """Acquires the repository for ``slot``.

        Raises:
            wscreate.exceptions.ProviderError: when listing or resolving repositories
                fails.
            wscreate.exceptions.PromptError: when the user cancels a prompt.
        """
        mode = self.resolve_mode(tracker)
        LOG.debug("Acquiring project #%s in %s mode", slot, mode.value)

        if mode == AcquisitionMode.WIZARD:
            outcome = self._wizard.browse(self._providers, slot, tracker)
            if isinstance(outcome, RepositoryPicked):
                tracker.mark_selected(repository_key(outcome.repository))
                if slot == 1:
                    add_more = self._multi_project
                else:
                    add_more = self._add_more_form.run()
                return Acquisition(repository=outcome.repository, add_more=add_more)

            LOG.debug("Wizard picked nothing: %s", outcome.reason)

        return self._acquire_from_url(slot, tracker)

    def _acquire_from_url(self, slot: int, tracker: SelectionTracker) -> Acquisition:
        if slot == 1:
            repository = self._url_form.prompt_repository(self._multi_project, tracker)
            add_more = self._multi_project
        else:
            repository, add_more = self._url_form.prompt_additional_repository(
                slot, tracker
            )

        tracker.mark_selected(repository_key(repository))
        return Acquisition(repository=repository, add_more=add_more)
