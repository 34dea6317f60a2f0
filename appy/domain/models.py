"""Domain models: normalized responses, the closed request error set and client config."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Union

HeaderMap = dict[str, str]


@dataclass(frozen=True)
class NormalizedResponse:
    """Canonical shape of any completed exchange (value object).

    body is the JSON-decoded response text, or the raw text when it is not JSON.
    """

    headers: HeaderMap
    status: int
    status_text: str
    url: str
    body: Any = None


@dataclass(frozen=True)
class NetworkError:
    """The transport failed before any response existed."""

    message: str
    uri: str
    type: Literal["NetworkError"] = field(default="NetworkError", init=False)


@dataclass(frozen=True)
class BadUrl:
    """A response was received with status 404."""

    url: str
    response: NormalizedResponse
    type: Literal["BadUrl"] = field(default="BadUrl", init=False)


@dataclass(frozen=True)
class BadResponse:
    """A response was received with any other non-ok status."""

    response: NormalizedResponse
    type: Literal["BadResponse"] = field(default="BadResponse", init=False)


RequestError = Union[NetworkError, BadUrl, BadResponse]


@dataclass(frozen=True)
class ClientConfig:
    """Runtime configuration a client is built from. base_uri is required for a usable client."""

    base_uri: str | None = None
    id: str | None = None
    version: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "ClientConfig":
        base_uri = data.get("base_uri")
        if base_uri is None:
            base_uri = data.get("baseUri")
        return ClientConfig(
            base_uri=base_uri,
            id=data.get("id"),
            version=data.get("version"),
        )


class ConfigError(Exception):
    """Raised when running a request built from a configuration without a base address."""

    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ConfigError) and other.error == self.error

    def __hash__(self) -> int:
        return hash(self.error)
