"""fcm-rest topic subpackage -- Instance ID topic management."""
from __future__ import annotations

from fcm_rest.topic.api import (
    ACCESS_TOKEN_AUTH_HEADER,
    TopicManagementAPI,
)
from fcm_rest.topic.models import (
    AndroidTopicInfo,
    ApnsImportRequest,
    ApnsImportResponse,
    ApnsImportResult,
    IosTopicInfo,
    Rel,
    TopicInfoResponse,
    TopicManagementRequest,
    TopicManagementResponse,
)

__all__ = [
    "ACCESS_TOKEN_AUTH_HEADER",
    "AndroidTopicInfo",
    "ApnsImportRequest",
    "ApnsImportResponse",
    "ApnsImportResult",
    "IosTopicInfo",
    "Rel",
    "TopicInfoResponse",
    "TopicManagementAPI",
    "TopicManagementRequest",
    "TopicManagementResponse",
]
