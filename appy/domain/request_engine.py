"""Request engine: wraps one network exchange in a deferred Task yielding an Outcome.

Nothing happens when request() is called; the exchange is performed each time
the returned Task is run. Failures never escape as exceptions: a transport
failure becomes NetworkError, a 404 becomes BadUrl and any other non-ok status
becomes BadResponse, the last two carrying the fully normalized response.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Union

from loguru import logger

from appy.constants import NOT_FOUND_STATUS, Method
from appy.core import SERVICE_NAME
from appy.domain.models import (
    BadResponse,
    BadUrl,
    HeaderMap,
    NetworkError,
    NormalizedResponse,
    RequestError,
)
from appy.domain.outcome import Err, Ok, Outcome
from appy.domain.task import Task
from appy.infrastructure.http.httpx_transport import HttpxTransport
from appy.ports.transport import Transport, TransportError, TransportResponse

RequestOutcome = Outcome[NormalizedResponse, RequestError]
RequestTask = Task[RequestOutcome]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def to_header_map(headers: Iterable[tuple[str, str]]) -> HeaderMap:
    result: HeaderMap = {}
    for key, value in headers:
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_body(text: str) -> Any:
    """JSON-decoded value of text, or text itself when it is not valid JSON."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


def _normalize(response: TransportResponse, body: Any) -> NormalizedResponse:
    return NormalizedResponse(
        headers=to_header_map(response.headers),
        status=int(response.status),
        status_text=str(response.status_text),
        url=str(response.url),
        body=body,
    )


def classify(uri: str, response: TransportResponse, normalized: NormalizedResponse) -> RequestOutcome:
    if response.ok:
        return Ok(normalized)
    if normalized.status == NOT_FOUND_STATUS:
        return Err(BadUrl(uri, normalized))
    return Err(BadResponse(normalized))


def request(
    method: Union[Method, str],
    uri: str,
    options: Mapping[str, Any] | None = None,
    *,
    transport: Transport | None = None,
) -> RequestTask:
    """Build a Task performing `method uri` with options passed through to the transport.

    The method is validated eagerly (ValueError for anything outside Method);
    no network activity happens until the Task is run.
    """
    verb = Method(method).value
    request_options: dict[str, Any] = {**(options or {}), "method": verb}

    async def _run() -> RequestOutcome:
        _transport = transport if transport is not None else HttpxTransport()
        _log("request_started", method=verb, uri=uri)
        try:
            response = await _transport.send(verb, uri, request_options)
            text = await response.text()
        except TransportError as exc:
            _log("request_failed", method=verb, uri=uri, error=str(exc))
            return Err(NetworkError(str(exc), uri))

        normalized = _normalize(response, parse_body(text))
        outcome = classify(uri, response, normalized)
        _log(
            "request_completed",
            method=verb,
            uri=uri,
            status=normalized.status,
            outcome=outcome.error.type if isinstance(outcome, Err) else "Ok",
        )
        return outcome

    return Task(_run)


def get(uri: str, options: Mapping[str, Any] | None = None, *, transport: Transport | None = None) -> RequestTask:
    return request(Method.GET, uri, options, transport=transport)


def post(uri: str, options: Mapping[str, Any] | None = None, *, transport: Transport | None = None) -> RequestTask:
    return request(Method.POST, uri, options, transport=transport)


def put(uri: str, options: Mapping[str, Any] | None = None, *, transport: Transport | None = None) -> RequestTask:
    return request(Method.PUT, uri, options, transport=transport)


def patch(uri: str, options: Mapping[str, Any] | None = None, *, transport: Transport | None = None) -> RequestTask:
    return request(Method.PATCH, uri, options, transport=transport)


def delete(uri: str, options: Mapping[str, Any] | None = None, *, transport: Transport | None = None) -> RequestTask:
    return request(Method.DELETE, uri, options, transport=transport)


del_ = delete
