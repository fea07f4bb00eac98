################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Book-keeping of what was already picked during one workspace creation session.

The hierarchy is::

    Git Provider ----> Namespaces (organizations/projects) ----> Repositories

A namespace is disabled once all of its repositories were selected, and a provider
once all of its namespaces were disabled. Nothing is ever removed: being exhausted
holds until the session ends.
"""
import logging
import typing as t

from ..schema.git import GitProviderId, GitRepository, NamespaceId

LOG = logging.getLogger(__name__)

RepoKey = str
NamespaceKey = t.Tuple[GitProviderId, NamespaceId]


def repository_key(repository: GitRepository) -> RepoKey:
    """Dedup key for a repository: its URL without ``.git`` and trailing slashes."""
    url = repository.url.strip().rstrip("/").lower()
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url


class SelectionTracker:
    def __init__(self):
        self._selected_repos: t.Set[RepoKey] = set()
        self._disabled_namespaces: t.Set[NamespaceKey] = set()
        self._disabled_providers: t.Set[GitProviderId] = set()

    @property
    def selected_repos(self) -> t.FrozenSet[RepoKey]:
        return frozenset(self._selected_repos)

    @property
    def disabled_namespaces(self) -> t.FrozenSet[NamespaceKey]:
        return frozenset(self._disabled_namespaces)

    @property
    def disabled_providers(self) -> t.FrozenSet[GitProviderId]:
        return frozenset(self._disabled_providers)

    # --- repositories ---

    def is_repo_selected(self, key: RepoKey) -> bool:
        return key in self._selected_repos

    def mark_selected(self, key: RepoKey):
        if key not in self._selected_repos:
            LOG.debug("Selected repository %s", key)
        self._selected_repos.add(key)

    # --- namespaces ---

    def is_namespace_disabled(
        self, provider_id: GitProviderId, namespace_id: NamespaceId
    ) -> bool:
        return (provider_id, namespace_id) in self._disabled_namespaces

    def disable_namespace(self, provider_id: GitProviderId, namespace_id: NamespaceId):
        if (provider_id, namespace_id) not in self._disabled_namespaces:
            LOG.debug("Namespace %s of provider %s exhausted", namespace_id, provider_id)
        self._disabled_namespaces.add((provider_id, namespace_id))

    # --- providers ---

    def is_provider_disabled(self, provider_id: GitProviderId) -> bool:
        return provider_id in self._disabled_providers

    def disable_provider(self, provider_id: GitProviderId):
        if provider_id not in self._disabled_providers:
            LOG.debug("Provider %s exhausted", provider_id)
        self._disabled_providers.add(provider_id)
