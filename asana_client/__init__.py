"""Asana API Client Package.

Minimal client for the Asana REST API using Basic authentication.
"""

from asana_client.client import AsanaClient, encode_api_key
from asana_client.errors import AsanaClientError, UnexpectedStatusError
from asana_client.settings import AsanaSettings, create_client

__all__ = [
    "AsanaClient",
    "AsanaClientError",
    "AsanaSettings",
    "UnexpectedStatusError",
    "create_client",
    "encode_api_key",
]

__version__ = "0.1.0"
