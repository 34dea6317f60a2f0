from __future__ import annotations

from typing import Any, Callable, Mapping

import pytest

from appy.ports.transport import TransportError


class FakeResponse:
    """Implements TransportResponse for tests; text() returns the raw body as given."""

    def __init__(
        self,
        text: str = "",
        *,
        ok: bool = True,
        status: int | None = None,
        status_text: str = "",
        url: str = "https://api.example.com/",
        headers: list[tuple[str, str]] | None = None,
        raise_on_text: Exception | None = None,
    ) -> None:
        self._text = text
        self.ok = ok
        self.status = status if status is not None else (200 if ok else 500)
        self.status_text = status_text
        self.url = url
        self.headers = headers or []
        self._raise_on_text = raise_on_text

    async def text(self) -> str:
        if self._raise_on_text is not None:
            raise self._raise_on_text
        return self._text


class FakeTransport:
    """Implements Transport for tests; records every send() call."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        *,
        raise_on_send: Exception | None = None,
    ) -> None:
        self.response = response or FakeResponse("{}")
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self._raise_on_send = raise_on_send

    async def send(self, method: str, url: str, options: Mapping[str, Any]) -> FakeResponse:
        self.calls.append((method, url, dict(options)))
        if self._raise_on_send is not None:
            raise self._raise_on_send
        return self.response


@pytest.fixture()
def make_response() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture()
def make_transport() -> Callable[..., FakeTransport]:
    return FakeTransport


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport(FakeResponse('{"a": 1}', status_text="OK"))


@pytest.fixture()
def failing_transport() -> FakeTransport:
    return FakeTransport(raise_on_send=TransportError("connection refused"))
