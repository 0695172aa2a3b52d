"""FCM HTTP v1 ``Message`` model.

A message addresses exactly one target, and the target kind is implied
by which addressing key is present -- the FCM API has no discriminant
field.  The three addressing modes are therefore three distinct classes:

* :class:`TokenMessage` -- a single registration token (``token``).
* :class:`TopicMessage` -- a topic name (``topic``), without the
  ``/topics/`` prefix.
* :class:`ConditionMessage` -- a boolean topic expression
  (``condition``), e.g. ``"'foo' in topics && 'bar' in topics"``.

The variant is fixed when the object is constructed.  Serialising any of
them emits the variant's fields directly at the ``message`` level, with
no tag, and omits every unset optional field.

See https://firebase.google.com/docs/reference/fcm/rest/v1/projects.messages
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fcm_rest.messaging.android import AndroidConfig
from fcm_rest.messaging.apns import ApnsConfig
from fcm_rest.messaging.webpush import WebPushConfig
from fcm_rest.wire.encoding import WireModel

# ---------------------------------------------------------------------------
# Shared records
# ---------------------------------------------------------------------------


class FcmOptions(WireModel):
    """Platform-independent options for features provided by the FCM SDKs."""

    analytics_label: str | None = None


class Notification(WireModel):
    """Basic notification template used across all platforms."""

    title: str | None = None
    body: str | None = None
    image: str | None = None


# ---------------------------------------------------------------------------
# Message variants
# ---------------------------------------------------------------------------


class _MessageBase(WireModel):
    fcm_options: FcmOptions | None = None
    notification: Notification | None = None
    android: AndroidConfig | None = None
    webpush: WebPushConfig | None = None
    apns: ApnsConfig | None = None


class TokenMessage(_MessageBase):
    """Message sent to a single registration token."""

    token: str
    name: str | None = None
    data: dict[str, str] | None = None


class TopicMessage(_MessageBase):
    """Message sent to every subscriber of a topic."""

    topic: str


class ConditionMessage(_MessageBase):
    """Message sent to the devices matching a topic condition."""

    condition: str


Message = TokenMessage | TopicMessage | ConditionMessage
"""Any FCM message; serialised untagged."""


# ---------------------------------------------------------------------------
# Request / response bodies for ``messages:send``
# ---------------------------------------------------------------------------


class MessagePayload(WireModel):
    """Request body of ``projects.messages.send``."""

    validate_only: bool = False
    message: Message


class MessageOutput(BaseModel):
    """Response body of ``projects.messages.send``.

    ``name`` is the identifier of the sent message, in the form
    ``projects/*/messages/{message_id}``.
    """

    model_config = ConfigDict(frozen=True)

    name: str


__all__ = [
    "ConditionMessage",
    "FcmOptions",
    "Message",
    "MessageOutput",
    "MessagePayload",
    "Notification",
    "TokenMessage",
    "TopicMessage",
]
