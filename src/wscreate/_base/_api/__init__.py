################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
from ._client import ApiClient, ExternalUriProvider

__all__ = ["ApiClient", "ExternalUriProvider"]
