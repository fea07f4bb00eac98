################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Repositories that encapsulate data access used by wscreate commands.
"""
import typing as t

from ... import exceptions
from ...schema.git import (
    GitNamespace,
    GitProvider,
    GitProviderId,
    GitRepository,
    NamespaceId,
)
from ...schema.projects import ProjectDefaults
from .. import _config
from .._api import ApiClient, ExternalUriProvider


def _make_api_client() -> ApiClient:
    """
    Raises:
        wscreate.exceptions.ServerNotConfiguredError: when there's no server URL in
            the config file nor in the environment.
        wscreate.exceptions.InvalidConfigError: when the config file can't be parsed.
    """
    config = _config.read_config()
    if not config.server.api_url:
        raise exceptions.ServerNotConfiguredError(
            "The workspace server URL isn't configured. Set it in "
            f"{_config.get_config_file_path()} or export WSCREATE_API_URL."
        )
    return ApiClient.from_token(
        config.server.token, ExternalUriProvider(config.server.api_url)
    )


class _ApiBackedRepo:
    # The client is created on first use, so instantiating a repo doesn't read the
    # config file.
    def __init__(self, client_factory: t.Callable[[], ApiClient] = _make_api_client):
        self._client_factory = client_factory
        self._client: t.Optional[ApiClient] = None

    @property
    def _api(self) -> ApiClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client


class GitProviderRepo(_ApiBackedRepo):
    def list_git_providers(self) -> t.List[GitProvider]:
        return self._api.list_git_providers()

    def list_namespaces(self, provider_id: GitProviderId) -> t.List[GitNamespace]:
        return self._api.list_namespaces(provider_id)

    def list_repositories(
        self, provider_id: GitProviderId, namespace_id: NamespaceId
    ) -> t.List[GitRepository]:
        return self._api.list_repositories(provider_id, namespace_id)

    def get_repository_from_url(self, url: str) -> GitRepository:
        """
        Raises:
            wscreate.exceptions.ProviderError: when the server can't resolve ``url``.
        """
        return self._api.get_git_context(url)


class WorkspaceRepo(_ApiBackedRepo):
    def list_workspace_names(self) -> t.List[str]:
        return [ws.name for ws in self._api.list_workspaces()]


class ConfigRepo:
    def read_project_defaults(self) -> ProjectDefaults:
        return _config.read_project_defaults()
