"""Concrete transport implementation using httpx (injected where Transport is needed)."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from appy.ports.transport import Transport, TransportError, TransportResponse, TransportTimeoutError

# Option keys forwarded to httpx.AsyncClient.request; "body" is the fetch-style name for content.
_PASSTHROUGH_OPTIONS = ("headers", "content", "json", "data", "params", "cookies", "timeout", "follow_redirects")


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the TransportResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._response.headers.items())

    async def text(self) -> str:
        try:
            await self._response.aread()
        except httpx.HTTPError as exc:
            raise TransportError(f"reading body failed for {self.url}: {exc}") from exc
        return self._response.text


def _request_kwargs(options: Mapping[str, Any], *, default_timeout: float | None, follow_redirects: bool) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"follow_redirects": follow_redirects}
    if default_timeout is not None:
        kwargs["timeout"] = default_timeout
    for key in _PASSTHROUGH_OPTIONS:
        if options.get(key) is not None:
            kwargs[key] = options[key]
    body = options.get("body")
    if body is not None and "content" not in kwargs:
        kwargs["content"] = body
    return kwargs


class HttpxTransport(Transport):
    """Transport implementation using httpx.AsyncClient.

    Without an injected client a fresh AsyncClient is opened and closed around
    every exchange, so no connection is reused between requests.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
        follow_redirects: bool = True,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._follow_redirects = follow_redirects

    async def send(self, method: str, url: str, options: Mapping[str, Any]) -> TransportResponse:
        kwargs = _request_kwargs(options, default_timeout=self._timeout, follow_redirects=self._follow_redirects)
        try:
            if self._client is not None:
                response = await self._client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, **kwargs)
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"timeout while requesting {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"request failed for {url}: {exc}") from exc
        except (TypeError, ValueError) as exc:
            # Raised while httpx builds the request (e.g. non-ASCII header values), before any response.
            raise TransportError(f"invalid request for {url}: {exc}") from exc

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
