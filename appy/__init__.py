"""Deferred, result-typed HTTP requests.

    from appy import get

    outcome = await get("https://api.example.com/users").run()
    if outcome.is_ok():
        print(outcome.value.body)
"""

from __future__ import annotations

from loguru import logger

from appy.api.client import ApiFn, make_client
from appy.api.headers import build_headers
from appy.composition import create_client
from appy.config.settings import Settings
from appy.constants import CONFIG_REJECT, Method
from appy.domain.models import (
    BadResponse,
    BadUrl,
    ClientConfig,
    ConfigError,
    HeaderMap,
    NetworkError,
    NormalizedResponse,
    RequestError,
)
from appy.domain.outcome import Err, Ok, Outcome
from appy.domain.request_engine import del_, delete, get, patch, post, put, request
from appy.domain.task import Task
from appy.ports.transport import Transport, TransportError, TransportResponse

# Silent unless the application opts in with logger.enable("appy").
logger.disable("appy")

__all__ = [
    "ApiFn",
    "BadResponse",
    "BadUrl",
    "CONFIG_REJECT",
    "ClientConfig",
    "ConfigError",
    "Err",
    "HeaderMap",
    "Method",
    "NetworkError",
    "NormalizedResponse",
    "Ok",
    "Outcome",
    "RequestError",
    "Settings",
    "Task",
    "Transport",
    "TransportError",
    "TransportResponse",
    "build_headers",
    "create_client",
    "del_",
    "delete",
    "get",
    "make_client",
    "patch",
    "post",
    "put",
    "request",
]
