"""Tests for the notification payload model.

Covers:

1. **Message variants** -- untagged serialisation of token, topic and
   condition messages; no ``null`` keys.
2. **Android** -- durations, enums, nested records.
3. **APNs** -- hyphenated keys, flags, alert/sound unions, payload merge,
   background preset.
4. **Webpush** -- free-form notification passthrough.
5. **End-to-end** -- the full ``messages:send`` request body.
"""
from __future__ import annotations

import json

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
from fcm_rest.messaging.apns import (
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
)
from fcm_rest.messaging.message import (
    ConditionMessage,
    FcmOptions,
    MessagePayload,
    Notification,
    TokenMessage,
    TopicMessage,
)
from fcm_rest.messaging.webpush import WebPushConfig, WebPushFcmOptions
from fcm_rest.wire.encoding import AndroidDuration, ApnsDuration, Flag

# =========================================================================
# Message variants
# =========================================================================


class TestMessageVariants:
    """Untagged serialisation of the three addressing modes."""

    def test_token_message_minimal(self) -> None:
        assert TokenMessage(token="tkn").to_wire() == {"token": "tkn"}

    def test_topic_message_minimal(self) -> None:
        assert TopicMessage(topic="news").to_wire() == {"topic": "news"}

    def test_condition_message_minimal(self) -> None:
        condition = "'foo' in topics && 'bar' in topics"
        assert ConditionMessage(condition=condition).to_wire() == {"condition": condition}

    def test_only_explicit_top_level_fields_emitted(self) -> None:
        message = TokenMessage(
            token="tkn",
            name="projects/p/messages/1",
            data={"k": "v"},
            notification=Notification(title="t"),
        )
        wire = message.to_wire()
        assert set(wire) == {"token", "name", "data", "notification"}
        assert wire["notification"] == {"title": "t"}

    def test_no_variant_tag_on_wire(self) -> None:
        raw = TopicMessage(topic="news").to_wire_json().decode()
        assert "TopicMessage" not in raw
        assert "Topic" not in raw

    def test_no_null_keys_anywhere(self) -> None:
        message = ConditionMessage(
            condition="'a' in topics",
            fcm_options=FcmOptions(),
            notification=Notification(),
            android=AndroidConfig(),
            webpush=WebPushConfig(),
            apns=ApnsConfig(),
        )
        raw = message.to_wire_json()
        assert b"null" not in raw
        assert json.loads(raw) == {
            "condition": "'a' in topics",
            "fcm_options": {},
            "notification": {},
            "android": {},
            "webpush": {},
            "apns": {},
        }

    def test_single_addressing_key(self) -> None:
        for message in (
            TokenMessage(token="t"),
            TopicMessage(topic="t"),
            ConditionMessage(condition="t"),
        ):
            keys = set(message.to_wire()) & {"token", "topic", "condition"}
            assert len(keys) == 1

    def test_payload_flattens_chosen_variant(self) -> None:
        payload = MessagePayload(validate_only=True, message=TopicMessage(topic="news"))
        assert payload.to_wire() == {"validate_only": True, "message": {"topic": "news"}}

    def test_payload_keeps_variant_type(self) -> None:
        payload = MessagePayload(message=TokenMessage(token="tkn", data={"a": "b"}))
        assert isinstance(payload.message, TokenMessage)
        assert payload.to_wire()["message"] == {"token": "tkn", "data": {"a": "b"}}


# =========================================================================
# Android
# =========================================================================


class TestAndroidConfig:
    """Serialisation of the Android options."""

    def test_ttl_and_priority(self) -> None:
        config = AndroidConfig(
            ttl=AndroidDuration(3.5),
            priority=AndroidMessagePriority.HIGH,
            direct_boot_ok=True,
        )
        assert config.to_wire() == {"ttl": "3.5s", "priority": "HIGH", "direct_boot_ok": True}

    def test_notification_fields(self) -> None:
        notification = AndroidNotification(
            title="example",
            vibrate_timings=[AndroidDuration(10.0)],
            notification_priority=NotificationPriority.PRIORITY_DEFAULT,
            visibility=Visibility.VISIBILITY_UNSPECIFIED,
            proxy=Proxy.IF_PRIORITY_LOWERED,
            sticky=True,
            notification_count=1,
            light_settings=LightSettings(
                color=Color(red=1.0, green=1.0, blue=1.0, alpha=1.0),
                light_on_duration=AndroidDuration(10.0),
            ),
        )
        assert notification.to_wire() == {
            "title": "example",
            "sticky": True,
            "notification_priority": "PRIORITY_DEFAULT",
            "vibrate_timings": ["10s"],
            "visibility": "VISIBILITY_UNSPECIFIED",
            "notification_count": 1,
            "light_settings": {
                "color": {"red": 1.0, "green": 1.0, "blue": 1.0, "alpha": 1.0},
                "light_on_duration": "10s",
            },
            "proxy": "IF_PRIORITY_LOWERED",
        }

    def test_booleans_stay_booleans(self) -> None:
        wire = AndroidNotification(local_only=True, default_sound=False).to_wire()
        assert wire == {"local_only": True, "default_sound": False}

    def test_fcm_options(self) -> None:
        config = AndroidConfig(fcm_options=AndroidFcmOptions(analytics_label="label"))
        assert config.to_wire() == {"fcm_options": {"analytics_label": "label"}}


# =========================================================================
# APNs
# =========================================================================


class TestApns:
    """Serialisation of the APNs options."""

    def test_headers_use_hyphenated_keys(self) -> None:
        headers = ApnsHeaders(
            apns_id="id",
            apns_push_type=ApnsPushType.ALERT,
            apns_expiration=ApnsDuration(3600),
            apns_priority=ApnsPriority.SEND_IMMEDIATELY,
            apns_topic="com.example.app",
            apns_collapse_id="collapse",
        )
        assert headers.to_wire() == {
            "apns-id": "id",
            "apns-push-type": "alert",
            "apns-expiration": "3600",
            "apns-priority": "10",
            "apns-topic": "com.example.app",
            "apns-collapse-id": "collapse",
        }

    def test_headers_accept_wire_names(self) -> None:
        headers = ApnsHeaders.model_validate({"apns-priority": "5"})
        assert headers.apns_priority is ApnsPriority.RESPECT_ENERGY_SAVING_MODE

    def test_aps_flags_are_integers(self) -> None:
        aps = Aps(content_available=ContentAvailable.ON, mutable_content=MutableContent.OFF)
        assert aps.to_wire() == {"content-available": 1, "mutable-content": 0}

    def test_simple_alert(self) -> None:
        assert Aps(alert="bar").to_wire() == {"alert": "bar"}

    def test_rich_alert_is_untagged(self) -> None:
        aps = Aps(alert=RichAlert(title="title", subtitle="subtitle", body="body", loc_key="k"))
        assert aps.to_wire() == {
            "alert": {"title": "title", "subtitle": "subtitle", "body": "body", "loc-key": "k"}
        }

    def test_critical_sound(self) -> None:
        aps = Aps(sound=CriticalSound(name="alarm.caf", volume=0.5))
        assert aps.to_wire() == {"sound": {"critical": 1, "name": "alarm.caf", "volume": 0.5}}

    def test_simple_sound(self) -> None:
        assert Aps(sound="default").to_wire() == {"sound": "default"}

    def test_build_merges_data_next_to_aps(self) -> None:
        config = ApnsConfig.build(Aps(badge=3), {"custom": "v"})
        assert config.payload == {"aps": {"badge": 3}, "custom": "v"}

    def test_build_merges_into_aps_recursively(self) -> None:
        config = ApnsConfig.build(Aps(badge=3), {"aps": {"category": "NEW"}})
        assert config.payload == {"aps": {"badge": 3, "category": "NEW"}}

    def test_build_does_not_alias_caller_data(self) -> None:
        data = {"nested": {"a": 1}}
        config = ApnsConfig.build(Aps(), data)
        assert config.payload is not None
        config.payload["nested"]["a"] = 2
        assert data == {"nested": {"a": 1}}

    def test_build_with_headers_and_fcm_options(self) -> None:
        config = ApnsConfig.build(
            Aps(alert="hi"),
            headers=ApnsHeaders(apns_push_type=ApnsPushType.ALERT),
            fcm_options=ApnsFcmOptions(image="https://example.com/a.png"),
        )
        assert config.to_wire() == {
            "headers": {"apns-push-type": "alert"},
            "payload": {"aps": {"alert": "hi"}},
            "fcm_options": {"image": "https://example.com/a.png"},
        }

    def test_background_preset(self) -> None:
        config = ApnsConfig.ios_background_notification({"example": "example"})
        assert config.to_wire() == {
            "headers": {"apns-push-type": "background", "apns-priority": "5"},
            "payload": {"aps": {"content-available": 1}, "example": "example"},
        }

    def test_flag_alias(self) -> None:
        assert ContentAvailable is Flag
        assert MutableContent is Flag


# =========================================================================
# Webpush
# =========================================================================


class TestWebPush:
    """Serialisation of the Webpush options."""

    def test_full_config(self) -> None:
        config = WebPushConfig(
            headers={"TTL": "60"},
            data={"foo": "bar"},
            notification={"title": "t", "requireInteraction": True},
            fcm_options=WebPushFcmOptions(link="https://example.com"),
        )
        assert config.to_wire() == {
            "headers": {"TTL": "60"},
            "data": {"foo": "bar"},
            "notification": {"title": "t", "requireInteraction": True},
            "fcm_options": {"link": "https://example.com"},
        }


# =========================================================================
# End-to-end
# =========================================================================


class TestEndToEnd:
    """Full request bodies."""

    def test_ios_background_topic_message(self) -> None:
        message = TopicMessage(
            topic="background_channel",
            notification=Notification(title="example"),
            apns=ApnsConfig.ios_background_notification({"message": "Hello, World!"}),
        )
        assert message.to_wire() == {
            "topic": "background_channel",
            "notification": {"title": "example"},
            "apns": {
                "payload": {
                    "aps": {"content-available": 1},
                    "message": "Hello, World!",
                },
                "headers": {
                    "apns-push-type": "background",
                    "apns-priority": "5",
                },
            },
        }

    def test_full_payload_is_valid_json(self) -> None:
        message = TopicMessage(
            topic="example",
            fcm_options=FcmOptions(analytics_label="example"),
            notification=Notification(title="example", body="example", image="https://e.com/i.png"),
            android=AndroidConfig(
                ttl=AndroidDuration(3.5),
                data={"foo": "bar"},
                notification=AndroidNotification(title="example", color="#FFFFFF"),
            ),
            webpush=WebPushConfig(data={"foo": "bar"}),
            apns=ApnsConfig.build(
                Aps(alert=RichAlert(title="example"), badge=42, thread_id="example"),
                {},
                ApnsHeaders(apns_expiration=ApnsDuration(3600)),
            ),
        )
        body = json.loads(MessagePayload(message=message).to_wire_json())
        assert body["validate_only"] is False
        assert body["message"]["android"]["ttl"] == "3.5s"
        assert body["message"]["apns"]["headers"]["apns-expiration"] == "3600"
        assert body["message"]["apns"]["payload"]["aps"] == {
            "alert": {"title": "example"},
            "badge": 42,
            "thread-id": "example",
        }
