################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""Models for git providers, namespaces and repositories.

Field names mirror the workspace server's JSON.
"""
import typing as t

from pydantic import BaseModel, ConfigDict

GitProviderId = str
NamespaceId = str


class GitProvider(BaseModel):
    """A git hosting account the user is authenticated against."""

    model_config = ConfigDict(frozen=True)

    id: GitProviderId
    providerId: str
    username: str = ""
    alias: t.Optional[str] = None
    baseApiUrl: t.Optional[str] = None

    @property
    def label(self) -> str:
        if self.alias:
            return self.alias
        if self.username:
            return f"{self.providerId} ({self.username})"
        return self.providerId


class GitNamespace(BaseModel):
    """An organization, group or user listing under a provider."""

    model_config = ConfigDict(frozen=True)

    id: NamespaceId
    name: str


class GitRepository(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str
    url: str
    owner: str = ""
    source: str = ""
    branch: t.Optional[str] = None
    sha: t.Optional[str] = None
    path: t.Optional[str] = None
    prNumber: t.Optional[int] = None


class GetRepositoryContext(BaseModel):
    """Request body for resolving a repository from its URL."""

    url: str
