"""fcm-rest -- typed asyncio client for Firebase Cloud Messaging.

Covers the FCM HTTP v1 send API and the Instance ID topic-management API.

Layers
------
1. Wire encodings (:mod:`fcm_rest.wire.encoding`)
2. Notification payload model (:mod:`fcm_rest.messaging`)
3. Error taxonomy (:mod:`fcm_rest.core.errors`)
4. Authenticated request pipeline (:mod:`fcm_rest.pipeline`)
5. Feature endpoints (:mod:`fcm_rest.messaging.api`, :mod:`fcm_rest.topic`)
"""
from __future__ import annotations

__version__ = "0.9.0"

# ---------------------------------------------------------------------------
# Core -- config, errors, interfaces
# ---------------------------------------------------------------------------
from fcm_rest.client import FCMClient
from fcm_rest.core.config import DEFAULT_SCOPES, FCMClientConfig
from fcm_rest.core.errors import (
    BuildRequestFailure,
    ConfigurationError,
    DecodeFailure,
    DeserializeFailure,
    FCMError,
    FCMInternal,
    FCMInternalRequestError,
    FCMInternalResponseError,
    FCMInvalidRequest,
    FCMInvalidRequestDescriptive,
    FCMRestError,
    FCMRetryableInternal,
    FCMUnauthorized,
    FCMUnknown,
    HttpRequestFailure,
    InternalServerError,
    InvalidRequest,
    RPCError,
    RPCUnauthorized,
    TopicInternalRequestError,
    TopicInternalResponseError,
    TopicInvalidRequest,
    TopicManagementError,
    TopicServerError,
    TopicUnauthorized,
    TopicUnknown,
    UnknownStatus,
)
from fcm_rest.core.interfaces import (
    CannedResponse,
    InMemoryTransport,
    StaticTokenProvider,
    TokenProvider,
    Transport,
    TransportResponse,
)

# ---------------------------------------------------------------------------
# Messaging
# ---------------------------------------------------------------------------
from fcm_rest.messaging import (
    AndroidConfig,
    AndroidNotification,
    ApnsConfig,
    ApnsHeaders,
    Aps,
    ConditionMessage,
    FcmOptions,
    Message,
    MessageOutput,
    MessagingAPI,
    Notification,
    RichAlert,
    TokenMessage,
    TopicMessage,
    WebPushConfig,
)

# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------
from fcm_rest.pipeline import RequestPipeline, classify_response

# ---------------------------------------------------------------------------
# Topic management
# ---------------------------------------------------------------------------
from fcm_rest.topic import (
    AndroidTopicInfo,
    IosTopicInfo,
    TopicInfoResponse,
    TopicManagementAPI,
    TopicManagementResponse,
)

# ---------------------------------------------------------------------------
# Wire
# ---------------------------------------------------------------------------
from fcm_rest.wire import (
    AndroidDuration,
    ApnsDuration,
    Flag,
    GoogleAuthTokenProvider,
    HttpxTransport,
    WireModel,
    deep_merge,
)

__all__ = [
    "__version__",
    # Client
    "FCMClient",
    # Core
    "DEFAULT_SCOPES",
    "FCMClientConfig",
    "CannedResponse",
    "InMemoryTransport",
    "StaticTokenProvider",
    "TokenProvider",
    "Transport",
    "TransportResponse",
    # Errors -- RPC
    "RPCError",
    "RPCUnauthorized",
    "BuildRequestFailure",
    "HttpRequestFailure",
    "DecodeFailure",
    "DeserializeFailure",
    "InvalidRequest",
    "InternalServerError",
    "UnknownStatus",
    # Errors -- domain
    "FCMRestError",
    "ConfigurationError",
    "FCMError",
    "FCMInternal",
    "FCMInternalRequestError",
    "FCMInternalResponseError",
    "FCMInvalidRequest",
    "FCMInvalidRequestDescriptive",
    "FCMRetryableInternal",
    "FCMUnauthorized",
    "FCMUnknown",
    "TopicManagementError",
    "TopicInternalRequestError",
    "TopicInternalResponseError",
    "TopicInvalidRequest",
    "TopicServerError",
    "TopicUnauthorized",
    "TopicUnknown",
    # Messaging
    "AndroidConfig",
    "AndroidNotification",
    "ApnsConfig",
    "ApnsHeaders",
    "Aps",
    "ConditionMessage",
    "FcmOptions",
    "Message",
    "MessageOutput",
    "MessagingAPI",
    "Notification",
    "RichAlert",
    "TokenMessage",
    "TopicMessage",
    "WebPushConfig",
    # Pipeline
    "RequestPipeline",
    "classify_response",
    # Topic management
    "AndroidTopicInfo",
    "IosTopicInfo",
    "TopicInfoResponse",
    "TopicManagementAPI",
    "TopicManagementResponse",
    # Wire
    "AndroidDuration",
    "ApnsDuration",
    "Flag",
    "GoogleAuthTokenProvider",
    "HttpxTransport",
    "WireModel",
    "deep_merge",
]
