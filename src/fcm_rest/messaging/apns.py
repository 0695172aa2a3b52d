"""Apple Push Notification Service options for FCM messages.

The APNs payload is not a fixed record: Apple delivers every top-level
key of the payload to the app, so custom data lives next to ``aps`` at
the same JSON level.  :meth:`ApnsConfig.build` therefore renders the
strongly-typed :class:`Aps` record to JSON and deep-merges the caller's
data map into it.

Wire conventions specific to APNs:

* header and ``aps`` keys are hyphenated (``apns-push-type``,
  ``content-available``);
* ``apns-expiration`` is a plain decimal string of whole seconds
  (:class:`~fcm_rest.wire.encoding.ApnsDuration`);
* ``content-available`` / ``mutable-content`` / ``critical`` are the
  integers ``1`` / ``0`` (:class:`~fcm_rest.wire.encoding.Flag`).
"""
from __future__ import annotations

import copy
import enum
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from fcm_rest.wire.encoding import (
    ApnsDuration,
    Flag,
    JSONObject,
    WireModel,
    deep_merge,
)

ContentAvailable = Flag
"""``aps.content-available``: wake the app for a background update."""

MutableContent = Flag
"""``aps.mutable-content``: let a notification service extension modify the content."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ApnsPushType(enum.StrEnum):
    """Value of the ``apns-push-type`` header."""

    ALERT = "alert"
    BACKGROUND = "background"
    LOCATION = "location"
    VOIP = "voip"
    COMPLICATION = "complication"
    FILEPROVIDER = "fileprovider"
    MDM = "mdm"
    LIVEACTIVITY = "liveactivity"
    PUSHTOTALK = "pushtotalk"


class ApnsPriority(enum.StrEnum):
    """Value of the ``apns-priority`` header."""

    SEND_IMMEDIATELY = "10"
    RESPECT_ENERGY_SAVING_MODE = "5"
    RESPECT_ENERGY_SAVING_MODE_NO_AWAKING = "1"


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


class ApnsHeaders(WireModel):
    """HTTP request headers forwarded to APNs."""

    authorization: str | None = None
    apns_id: str | None = Field(default=None, alias="apns-id")
    apns_push_type: ApnsPushType | None = Field(default=None, alias="apns-push-type")
    apns_expiration: ApnsDuration | None = Field(default=None, alias="apns-expiration")
    apns_priority: ApnsPriority | None = Field(default=None, alias="apns-priority")
    apns_topic: str | None = Field(default=None, alias="apns-topic")
    apns_collapse_id: str | None = Field(default=None, alias="apns-collapse-id")

    @classmethod
    def ios_background_notification(cls) -> ApnsHeaders:
        """Headers required for a silent background update."""
        return cls(
            apns_push_type=ApnsPushType.BACKGROUND,
            apns_priority=ApnsPriority.RESPECT_ENERGY_SAVING_MODE,
        )


# ---------------------------------------------------------------------------
# aps dictionary
# ---------------------------------------------------------------------------


class RichAlert(WireModel):
    """Structured ``aps.alert`` dictionary."""

    title: str | None = None
    subtitle: str | None = None
    body: str | None = None
    launch_image: str | None = Field(default=None, alias="launch-image")
    title_loc_key: str | None = Field(default=None, alias="title-loc-key")
    title_loc_args: list[str] | None = Field(default=None, alias="title-loc-args")
    subtitle_loc_key: str | None = Field(default=None, alias="subtitle-loc-key")
    subtitle_loc_args: list[str] | None = Field(default=None, alias="subtitle-loc-args")
    loc_key: str | None = Field(default=None, alias="loc-key")
    loc_args: list[str] | None = Field(default=None, alias="loc-args")


class CriticalSound(WireModel):
    """Structured ``aps.sound`` dictionary for critical alerts."""

    critical: Flag = Flag.ON
    name: str
    volume: float = Field(default=1.0, ge=0.0, le=1.0)


Alert = str | RichAlert
"""``aps.alert``: either a plain string or a :class:`RichAlert` dictionary."""

Sound = str | CriticalSound
"""``aps.sound``: either a sound file name or a :class:`CriticalSound` dictionary."""


class Aps(WireModel):
    """The ``aps`` dictionary of an APNs payload."""

    alert: Alert | None = None
    badge: int | None = Field(default=None, ge=0)
    sound: Sound | None = None
    thread_id: str | None = Field(default=None, alias="thread-id")
    content_available: ContentAvailable | None = Field(default=None, alias="content-available")
    mutable_content: MutableContent | None = Field(default=None, alias="mutable-content")
    timestamp: int | None = Field(default=None, ge=0)
    event: str | None = None
    dismissal_date: int | None = Field(default=None, ge=0, alias="dismissal-date")
    attributes_type: str | None = Field(default=None, alias="attributes-type")


# ---------------------------------------------------------------------------
# ApnsConfig
# ---------------------------------------------------------------------------


class ApnsFcmOptions(WireModel):
    """Options for features provided by the FCM SDK for iOS."""

    analytics_label: str | None = None
    image: str | None = None


class ApnsConfig(WireModel):
    """APNs-specific options attached to a message.

    Build instances with :meth:`build` (or one of the presets) rather
    than by passing ``payload`` directly, so that the ``aps`` record and
    the custom data end up merged at the same JSON level.
    """

    headers: ApnsHeaders | None = None
    payload: dict[str, Any] | None = None
    fcm_options: ApnsFcmOptions | None = None

    @classmethod
    def build(
        cls,
        aps: Aps,
        data: Mapping[str, Any] | None = None,
        headers: ApnsHeaders | None = None,
        *,
        fcm_options: ApnsFcmOptions | None = None,
    ) -> ApnsConfig:
        """Create a config whose payload is ``{"aps": aps}`` deep-merged with *data*."""
        return cls(
            headers=headers,
            payload=merge_payload(aps, data or {}),
            fcm_options=fcm_options,
        )

    @classmethod
    def ios_background_notification(cls, data: Mapping[str, Any]) -> ApnsConfig:
        """Silent background update carrying *data*.

        Sets ``aps.content-available`` to ``1`` together with the
        ``background`` push type and energy-saving priority required by
        APNs for this kind of notification.
        """
        return cls.build(
            Aps(content_available=ContentAvailable.ON),
            data,
            ApnsHeaders.ios_background_notification(),
        )


def merge_payload(aps: Aps, data: Mapping[str, Any]) -> JSONObject:
    """Render ``{"aps": aps}`` and deep-merge a copy of *data* into it."""
    payload: JSONObject = {"aps": aps.to_wire()}
    return deep_merge(payload, copy.deepcopy(dict(data)))


__all__ = [
    "Alert",
    "Aps",
    "ApnsConfig",
    "ApnsDuration",
    "ApnsFcmOptions",
    "ApnsHeaders",
    "ApnsPriority",
    "ApnsPushType",
    "ContentAvailable",
    "CriticalSound",
    "MutableContent",
    "RichAlert",
    "Sound",
    "merge_payload",
]
