"""UniFi controller HTTP client.

Provides the concrete site-scoped transport used by the report service:
session login, site URL composition for classic controllers and UniFi OS
consoles, and msgspec decoding of controller responses.
"""

from __future__ import annotations

from .client import ControllerClient
from .config import ControllerConfig
from .errors import (
    ControllerAPIError,
    ControllerConfigError,
    ControllerError,
    ControllerResponseShapeError,
)
from .models import ResponseMeta

__all__ = [
    "ControllerAPIError",
    "ControllerClient",
    "ControllerConfig",
    "ControllerConfigError",
    "ControllerError",
    "ControllerResponseShapeError",
    "ResponseMeta",
]
