"""
Composition root: single place where the concrete transport is wired.

Builds settings and the transport from config and hands both to the client
factory. No DI container library, explicit wiring only.
"""
from __future__ import annotations

from appy.api.client import ApiFn, make_client
from appy.config.settings import Settings
from appy.infrastructure.http.factory import create_transport


def create_client(settings: Settings | None = None) -> ApiFn:
    """Build a client from settings (environment / .env when not given)."""
    _settings = settings or Settings()
    transport = create_transport(_settings)
    return make_client(_settings.to_client_config(), transport=transport)
