"""
Dependency providers.

Callers that do not want to build settings or clients by hand use these
cached factories. Tests construct JsonHttpClient directly instead.
"""

from __future__ import annotations

from functools import lru_cache

from config import AppSettings
from infrastructure.json_client.client import JsonHttpClient
from infrastructure.json_client.protocol import JsonClient


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide AppSettings, loaded once from the environment."""
    return AppSettings()


@lru_cache(maxsize=1)
def get_client() -> JsonClient:
    """Return the process-wide JSON client built from get_settings()."""
    return JsonHttpClient(get_settings().client)
