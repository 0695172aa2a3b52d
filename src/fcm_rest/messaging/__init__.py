"""fcm-rest messaging subpackage -- the FCM ``Message`` model and send/validate API.

* **Message model** -- untagged token/topic/condition messages
  (:mod:`~fcm_rest.messaging.message`).
* **Platform options** -- Android (:mod:`~fcm_rest.messaging.android`),
  APNs (:mod:`~fcm_rest.messaging.apns`) and Webpush
  (:mod:`~fcm_rest.messaging.webpush`).
* **API** -- :class:`~fcm_rest.messaging.api.MessagingAPI`.
"""
from __future__ import annotations

# -- Android ----------------------------------------------------------------
from fcm_rest.messaging.android import (
    AndroidConfig,
    AndroidFcmOptions,
    AndroidMessagePriority,
    AndroidNotification,
    Color,
    LightSettings,
    NotificationPriority,
    Proxy,
    Visibility,
)

# -- API --------------------------------------------------------------------
from fcm_rest.messaging.api import MessagingAPI

# -- APNs -------------------------------------------------------------------
from fcm_rest.messaging.apns import (
    Alert,
    ApnsConfig,
    ApnsFcmOptions,
    ApnsHeaders,
    ApnsPriority,
    ApnsPushType,
    Aps,
    ContentAvailable,
    CriticalSound,
    MutableContent,
    RichAlert,
    Sound,
)

# -- Message ----------------------------------------------------------------
from fcm_rest.messaging.message import (
    ConditionMessage,
    FcmOptions,
    Message,
    MessageOutput,
    MessagePayload,
    Notification,
    TokenMessage,
    TopicMessage,
)

# -- Webpush ----------------------------------------------------------------
from fcm_rest.messaging.webpush import WebPushConfig, WebPushFcmOptions

__all__ = [
    # Android
    "AndroidConfig",
    "AndroidFcmOptions",
    "AndroidMessagePriority",
    "AndroidNotification",
    "Color",
    "LightSettings",
    "NotificationPriority",
    "Proxy",
    "Visibility",
    # API
    "MessagingAPI",
    # APNs
    "Alert",
    "ApnsConfig",
    "ApnsFcmOptions",
    "ApnsHeaders",
    "ApnsPriority",
    "ApnsPushType",
    "Aps",
    "ContentAvailable",
    "CriticalSound",
    "MutableContent",
    "RichAlert",
    "Sound",
    # Message
    "ConditionMessage",
    "FcmOptions",
    "Message",
    "MessageOutput",
    "MessagePayload",
    "Notification",
    "TokenMessage",
    "TopicMessage",
    # Webpush
    "WebPushConfig",
    "WebPushFcmOptions",
]
