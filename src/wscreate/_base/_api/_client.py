################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Code for accessing the workspace server's HTTP API.

Only the endpoints needed for collecting workspace creation data are implemented.
"""
import logging
from typing import List, Mapping, Optional, Tuple
from urllib.parse import quote, urljoin

import requests
from pydantic import TypeAdapter
from requests import codes

from ... import exceptions
from ...schema.git import (
    GetRepositoryContext,
    GitNamespace,
    GitProvider,
    GitProviderId,
    GitRepository,
    NamespaceId,
)
from ...schema.projects import WorkspaceSummary

LOG = logging.getLogger(__name__)


class ExternalUriProvider:
    API_ACTIONS = {
        # Git providers
        "list_git_providers": "/gitprovider",
        "list_namespaces": "/gitprovider/{}/namespaces",
        "list_repositories": "/gitprovider/{}/{}/repositories",
        "get_git_context": "/gitprovider/context",
        # Workspaces
        "list_workspaces": "/workspace",
    }

    def __init__(self, base_uri: str):
        self._base_uri = base_uri

    def uri_for(
        self, action_id: str, parameters: Optional[Tuple[str, ...]] = None
    ) -> str:
        endpoint = ExternalUriProvider.API_ACTIONS[action_id]
        if parameters:
            endpoint = endpoint.format(*(quote(p, safe="") for p in parameters))
        return urljoin(self._base_uri, endpoint)


def _handle_common_errors(response: requests.Response):
    if response.status_code == codes.UNAUTHORIZED:
        raise exceptions.InvalidTokenError("The API token was rejected.")
    elif response.status_code == codes.FORBIDDEN:
        raise exceptions.ForbiddenError(f"Access to {response.url} is forbidden.")
    elif response.status_code == codes.NOT_FOUND:
        raise exceptions.NotFoundError(f"{response.url} was not found.")
    elif not response.ok:
        raise exceptions.UnknownHTTPError(
            response.status_code, response.text, uri=response.url
        )


class ApiClient:
    """Client for interacting with the workspace server via HTTP."""

    def __init__(self, session: requests.Session, uri_provider: ExternalUriProvider):
        self._uri_provider = uri_provider
        self._session = session

    @classmethod
    def from_token(
        cls, token: Optional[str], uri_provider: ExternalUriProvider
    ) -> "ApiClient":
        """Create a client from a token and URI.

        Args:
            token: API key used as a bearer token. No auth header is sent if None.
            uri_provider: Class that provides URIs for http requests
        """
        session = requests.Session()
        session.headers["Content-Type"] = "application/json"
        if token:
            session.headers["Authorization"] = f"Bearer {token}"
        return cls(session=session, uri_provider=uri_provider)

    # --- helpers ---

    def _get(self, uri: str, query_params: Optional[Mapping] = None):
        LOG.debug("GET %s", uri)
        try:
            response = self._session.get(uri, params=query_params)
        except requests.exceptions.ConnectionError as e:
            raise exceptions.RemoteConnectionError(uri) from e

        _handle_common_errors(response)
        return response

    def _post(self, uri: str, body_params: Optional[Mapping]):
        LOG.debug("POST %s", uri)
        try:
            response = self._session.post(uri, json=body_params)
        except requests.exceptions.ConnectionError as e:
            raise exceptions.RemoteConnectionError(uri) from e

        _handle_common_errors(response)
        return response

    # --- queries ---

    def list_git_providers(self) -> List[GitProvider]:
        """Lists the git providers the user has configured.

        Raises:
            wscreate.exceptions.RemoteConnectionError: when the server is unreachable.
            wscreate.exceptions.InvalidTokenError: when the token is rejected.
            wscreate.exceptions.UnknownHTTPError: when any other error is returned.
        """
        resp = self._get(self._uri_provider.uri_for("list_git_providers"))
        return TypeAdapter(List[GitProvider]).validate_python(resp.json())

    def list_namespaces(self, provider_id: GitProviderId) -> List[GitNamespace]:
        resp = self._get(
            self._uri_provider.uri_for("list_namespaces", (provider_id,))
        )
        return TypeAdapter(List[GitNamespace]).validate_python(resp.json())

    def list_repositories(
        self, provider_id: GitProviderId, namespace_id: NamespaceId
    ) -> List[GitRepository]:
        resp = self._get(
            self._uri_provider.uri_for(
                "list_repositories", (provider_id, namespace_id)
            )
        )
        return TypeAdapter(List[GitRepository]).validate_python(resp.json())

    def get_git_context(self, url: str) -> GitRepository:
        """Resolves a repository URL into the repository's details.

        Raises:
            wscreate.exceptions.NotFoundError: when the server couldn't resolve the URL.
        """
        resp = self._post(
            self._uri_provider.uri_for("get_git_context"),
            body_params=GetRepositoryContext(url=url).model_dump(),
        )
        return GitRepository.model_validate(resp.json())

    def list_workspaces(self) -> List[WorkspaceSummary]:
        resp = self._get(self._uri_provider.uri_for("list_workspaces"))
        return TypeAdapter(List[WorkspaceSummary]).validate_python(resp.json())
