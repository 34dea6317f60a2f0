"""Transport port: contract for performing one network exchange.

Domain code talks to the network only through this port; infrastructure (e.g.
httpx) implements it. The request engine falls back to HttpxTransport when no
transport is injected.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable


class TransportError(Exception):
    """The exchange could not be completed (DNS, connection refused, timeout, ...)."""


class TransportTimeoutError(TransportError):
    """Raised when the exchange times out before a response exists."""


@runtime_checkable
class TransportResponse(Protocol):
    """Minimal read-only view of a received response."""

    @property
    def ok(self) -> bool: ...

    @property
    def status(self) -> int: ...

    @property
    def status_text(self) -> str: ...

    @property
    def url(self) -> str: ...

    @property
    def headers(self) -> Iterable[tuple[str, str]]: ...

    async def text(self) -> str: ...


@runtime_checkable
class Transport(Protocol):
    """Port: perform one request. Implementations live in infrastructure."""

    async def send(self, method: str, url: str, options: Mapping[str, Any]) -> TransportResponse:
        """Perform the exchange; raise TransportError if no response could be obtained."""
        ...
