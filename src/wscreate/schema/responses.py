################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import enum


class ResponseStatusCode(enum.Enum):
    """Process exit codes used by the ``wscreate`` CLI."""

    UNKNOWN_ERROR = -1
    NOT_FOUND = 2
    INVALID_PROJECT_NAME = 5
    CONNECTION_ERROR = 11
    UNAUTHORIZED = 12
    USER_CANCELLED = 15
    INVALID_CONFIG = 16
