"""Android-specific options for messages sent through the FCM connection server.

Mirrors the ``AndroidConfig`` resource of the FCM HTTP v1 API.  Durations
use :class:`~fcm_rest.wire.encoding.AndroidDuration` (``"3.5s"``).
"""
from __future__ import annotations

import enum

from pydantic import Field

from fcm_rest.wire.encoding import AndroidDuration, WireModel

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AndroidMessagePriority(enum.StrEnum):
    """Delivery priority of an Android message."""

    HIGH = "HIGH"
    NORMAL = "NORMAL"


class NotificationPriority(enum.StrEnum):
    """Relative priority of the notification on the device."""

    PRIORITY_UNSPECIFIED = "PRIORITY_UNSPECIFIED"
    PRIORITY_MIN = "PRIORITY_MIN"
    PRIORITY_LOW = "PRIORITY_LOW"
    PRIORITY_DEFAULT = "PRIORITY_DEFAULT"
    PRIORITY_HIGH = "PRIORITY_HIGH"
    PRIORITY_MAX = "PRIORITY_MAX"


class Visibility(enum.StrEnum):
    """Lock-screen visibility of the notification."""

    VISIBILITY_UNSPECIFIED = "VISIBILITY_UNSPECIFIED"
    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    SECRET = "SECRET"


class Proxy(enum.StrEnum):
    """Whether the notification may be proxied by the device."""

    PROXY_UNSPECIFIED = "PROXY_UNSPECIFIED"
    ALLOW = "ALLOW"
    DENY = "DENY"
    IF_PRIORITY_LOWERED = "IF_PRIORITY_LOWERED"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class Color(WireModel):
    """RGBA color; each channel is in ``[0, 1]``."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0


class LightSettings(WireModel):
    """LED settings for the notification."""

    color: Color = Field(default_factory=Color)
    light_on_duration: AndroidDuration | None = None
    light_off_duration: AndroidDuration | None = None


class AndroidFcmOptions(WireModel):
    """Options for features provided by the FCM SDK for Android."""

    analytics_label: str | None = None


class AndroidNotification(WireModel):
    """Notification to send to Android devices."""

    title: str | None = None
    body: str | None = None
    icon: str | None = None
    color: str | None = Field(
        default=None,
        description="Icon color in #rrggbb format.",
    )
    sound: str | None = None
    tag: str | None = None
    click_action: str | None = None
    body_loc_key: str | None = None
    body_loc_args: list[str] | None = None
    title_loc_key: str | None = None
    title_loc_args: list[str] | None = None
    channel_id: str | None = None
    ticker: str | None = None
    sticky: bool | None = None
    event_time: str | None = Field(
        default=None,
        description="RFC 3339 timestamp, e.g. ``2014-10-02T15:01:23Z``.",
    )
    local_only: bool | None = None
    notification_priority: NotificationPriority | None = None
    default_sound: bool | None = None
    default_vibrate_timings: bool | None = None
    default_light_settings: bool | None = None
    vibrate_timings: list[AndroidDuration] | None = None
    visibility: Visibility | None = None
    notification_count: int | None = Field(default=None, ge=0)
    light_settings: LightSettings | None = None
    image: str | None = None
    proxy: Proxy | None = None
    # Deprecated upstream in favour of ``proxy``.
    bypass_proxy_notification: bool | None = None


class AndroidConfig(WireModel):
    """Android-specific options attached to a :class:`~fcm_rest.messaging.message.Message`."""

    collapse_key: str | None = None
    priority: AndroidMessagePriority | None = None
    ttl: AndroidDuration | None = None
    restricted_package_name: str | None = None
    data: dict[str, str] | None = None
    notification: AndroidNotification | None = None
    fcm_options: AndroidFcmOptions | None = None
    direct_boot_ok: bool | None = None


__all__ = [
    "AndroidConfig",
    "AndroidFcmOptions",
    "AndroidMessagePriority",
    "AndroidNotification",
    "Color",
    "LightSettings",
    "NotificationPriority",
    "Proxy",
    "Visibility",
]
