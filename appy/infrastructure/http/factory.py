"""Transport factory: selects and assembles the HTTP adapter from settings."""
from __future__ import annotations

from appy.config.settings import Settings
from appy.infrastructure.http.httpx_transport import HttpxTransport
from appy.ports.transport import Transport


def create_transport(settings: Settings) -> Transport:
    """Select transport adapter from configuration and return port type."""
    backend = settings.transport_backend.strip().lower()

    if backend in ("httpx", ):
        return HttpxTransport(
            timeout=settings.request_timeout_seconds,
            follow_redirects=settings.follow_redirects,
        )
    raise ValueError(f"Unsupported transport backend: {backend}")
