"""Library-level constants shared across modules."""
from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


# Rejection code carried by ConfigError when a client has no base address.
CONFIG_REJECT = "CONFIG_REJECT"

NOT_FOUND_STATUS = 404
