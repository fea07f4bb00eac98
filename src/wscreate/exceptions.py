################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################

"""Custom exceptions for wscreate."""

import typing as t


class BaseRuntimeError(Exception):
    """Base class for wscreate errors."""

    def __init__(self, message: t.Optional[str] = None):
        super().__init__(message)
        self.message = message


# Naming
class ProjectNameDecodeError(BaseRuntimeError):
    """Raised when a project name contains malformed percent-encoding."""

    def __init__(self, name: str, message: t.Optional[str] = None):
        super().__init__(message or f"Invalid percent-encoding in '{name}'")
        self.name = name


# Provider / API errors
class ProviderError(BaseRuntimeError):
    """Base class for failures reported by the workspace server or a git provider."""

    pass


class RemoteConnectionError(ProviderError):
    """Raised when the workspace server can't be reached."""

    def __init__(self, uri: str):
        super().__init__(f"Unable to connect to {uri}")
        self.uri = uri


class InvalidTokenError(ProviderError):
    """Raised when the server rejects the API token."""

    pass


class ForbiddenError(ProviderError):
    """Raised when the token doesn't allow accessing the requested resource."""

    pass


class NotFoundError(ProviderError):
    """Raised when the requested provider, namespace or repository doesn't exist."""

    pass


class UnknownHTTPError(ProviderError):
    """Raised on any other unsuccessful HTTP response."""

    def __init__(self, status_code: int, body: str, uri: str = ""):
        super().__init__(f"Unexpected HTTP {status_code} from {uri}: {body}")
        self.status_code = status_code
        self.body = body
        self.uri = uri


# Prompt errors
class PromptError(BaseRuntimeError):
    """Base class for failures while collecting input from the user."""

    pass


class UserCancelledPrompt(PromptError):
    """Raised when the user cancels a prompt or declines the final confirmation."""

    pass


class NoOptionsAvailableError(PromptError):
    """Raised when a prompt has no options to choose from."""

    pass


# Config errors
class ConfigFileNotFoundError(BaseRuntimeError):
    """Raised when the configuration file cannot be found."""

    pass


class InvalidConfigError(BaseRuntimeError):
    """Raised when the configuration file can't be parsed."""

    pass


class ServerNotConfiguredError(BaseRuntimeError):
    """Raised when a command needs the workspace server but no URL is configured."""

    pass
