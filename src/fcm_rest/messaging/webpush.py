"""Webpush protocol options (RFC 8030) for FCM messages."""
from __future__ import annotations

from typing import Any

from fcm_rest.wire.encoding import WireModel


class WebPushFcmOptions(WireModel):
    """Options for features provided by the FCM SDK for Web."""

    link: str | None = None
    analytics_label: str | None = None


class WebPushConfig(WireModel):
    """Webpush-specific options.

    ``notification`` is passed through as a free-form JSON object
    (the Web Notification API options).
    """

    headers: dict[str, str] | None = None
    data: dict[str, str] | None = None
    notification: dict[str, Any] | None = None
    fcm_options: WebPushFcmOptions | None = None


__all__ = ["WebPushConfig", "WebPushFcmOptions"]
