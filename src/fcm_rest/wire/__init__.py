"""fcm-rest wire subpackage -- payload encodings and HTTP collaborators.

* **Encodings** -- omit-if-absent records, duration and flag encodings,
  deep merge (:mod:`~fcm_rest.wire.encoding`).
* **HTTP** -- httpx transport and google-auth token provider
  (:mod:`~fcm_rest.wire.http`).
"""
from __future__ import annotations

# -- Encodings --------------------------------------------------------------
from fcm_rest.wire.encoding import (
    AndroidDuration,
    ApnsDuration,
    Flag,
    JSONObject,
    WireModel,
    deep_merge,
)

# -- HTTP -------------------------------------------------------------------
from fcm_rest.wire.http import (
    GoogleAuthTokenProvider,
    HttpxResponse,
    HttpxTransport,
)

__all__ = [
    # Encodings
    "AndroidDuration",
    "ApnsDuration",
    "Flag",
    "JSONObject",
    "WireModel",
    "deep_merge",
    # HTTP
    "GoogleAuthTokenProvider",
    "HttpxResponse",
    "HttpxTransport",
]
