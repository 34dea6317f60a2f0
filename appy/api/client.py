"""Client factory: binds the request engine to a base address and identity.

A configuration without a base address yields a client whose every Task
rejects with ConfigError(CONFIG_REJECT) when run. That rejection is a
precondition failure and is kept apart from the request Outcome.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Union

from loguru import logger

from appy.api.headers import build_headers
from appy.constants import CONFIG_REJECT, Method
from appy.core import SERVICE_NAME
from appy.domain.models import ClientConfig, ConfigError
from appy.domain.request_engine import RequestTask, request
from appy.domain.task import Task
from appy.ports.transport import Transport

ApiFn = Callable[..., RequestTask]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def concat_strings(parts: Iterable[Any]) -> str:
    """Join parts as text, skipping None. No separator is inserted between parts."""
    return "".join(str(part) for part in parts if part is not None)


def _rejecting_client() -> ApiFn:
    def api(*args: Any, **kwargs: Any) -> RequestTask:
        _log("client_config_rejected", error=CONFIG_REJECT)
        return Task.reject(ConfigError(CONFIG_REJECT))

    return api


def _bound_client(config: ClientConfig, transport: Transport | None) -> ApiFn:
    base_uri = config.base_uri

    def api(
        method: Union[Method, str],
        path: Optional[str],
        token: Optional[str] = None,
        options: Mapping[str, Any] | None = None,
    ) -> RequestTask:
        identity = {"version": config.version, "id": config.id, "token": token}
        request_options = {**(options or {}), "headers": build_headers(identity, options)}
        return request(method, concat_strings([base_uri, path]), request_options, transport=transport)

    return api


def make_client(
    config: Union[ClientConfig, Mapping[str, Any], None],
    *,
    transport: Transport | None = None,
) -> ApiFn:
    """Return a request function bound to config, or one that always rejects when base_uri is missing."""
    if config is None:
        return _rejecting_client()
    if not isinstance(config, ClientConfig):
        config = ClientConfig.from_mapping(config)
    if config.base_uri is None:
        return _rejecting_client()
    return _bound_client(config, transport)
