################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Logging configuration for the ``wscreate`` CLI.

Note: ``wscreate`` is usable both as a library and as an app (the CLI). Logging
should be only configured by apps.
"""

import logging

from .. import _env


def configure_verboseness_if_needed():
    if not _env.flag_set(_env.WSCREATE_VERBOSE):
        return

    logging.basicConfig(level=logging.DEBUG)
