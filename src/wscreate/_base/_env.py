################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################

"""Global constants used to access environment variables."""

import os
import typing as t

CONFIG_PATH_ENV = "WSCREATE_CONFIG_PATH"
"""
Used to configure the location of the `config.json`
Example:
    WSCREATE_CONFIG_PATH=/tmp/config.json
"""

API_URL_ENV = "WSCREATE_API_URL"
"""
Overrides the workspace server URL stored in the config file.
"""

API_TOKEN_ENV = "WSCREATE_API_TOKEN"
"""
Overrides the API token stored in the config file.
"""

WSCREATE_VERBOSE = "WSCREATE_VERBOSE"
"""
If set to a truthy value, enables printing debug information when running the
``wscreate`` CLI commands.
"""

# ------------------------------- utilities ----------------------------------


def _is_truthy(env_var_value: t.Optional[str]):
    if env_var_value is None:
        return False

    return env_var_value.lower() in {"1", "true"}


def flag_set(env_var_name: str) -> bool:
    value = os.getenv(env_var_name)
    return _is_truthy(value)
