"""Header builder: computes identity headers and merges them with caller-supplied ones."""
from __future__ import annotations

from typing import Any, Mapping

from appy.domain.models import HeaderMap

ACCEPT_HEADER = "Accept"
AUTHORIZATION_HEADER = "Authorization"
CLIENT_ID_HEADER = "X-Client-Id"
API_VERSION_HEADER = "X-Api-Version"


def identity_headers(identity: Mapping[str, Any]) -> HeaderMap:
    result: HeaderMap = {ACCEPT_HEADER: "application/json"}
    token = identity.get("token")
    if token:
        result[AUTHORIZATION_HEADER] = f"Bearer {token}"
    client_id = identity.get("id")
    if client_id:
        result[CLIENT_ID_HEADER] = str(client_id)
    version = identity.get("version")
    if version:
        result[API_VERSION_HEADER] = str(version)
    return result


def build_headers(identity: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> HeaderMap:
    """Identity headers overlaid with options["headers"]; headers the caller sets explicitly win."""
    merged = identity_headers(identity)
    explicit = (options or {}).get("headers") or {}
    for key, value in dict(explicit).items():
        merged[str(key)] = str(value)
    return merged
