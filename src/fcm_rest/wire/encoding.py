"""Scalar and aggregate encodings shared by every FCM payload record.

This module provides:

* **WireModel** -- base model for every payload record.  Serialisation
  omits unset optional fields entirely (no ``null`` is ever emitted) and
  uses the wire aliases.
* **AndroidDuration** -- seconds rendered as ``"<float>s"``.
* **ApnsDuration** -- whole seconds rendered as a plain decimal string.
* **Flag** -- two-state flag rendered as the integers ``1`` / ``0``.
* **deep_merge** -- recursive JSON-object merge.

Untagged variants need no helper: a field typed as a union of concrete
``WireModel`` classes (or of ``str`` and a model) serialises the chosen
member's fields directly, with no wrapper or tag.

All helpers are side-effect-free except :func:`deep_merge`, which mutates
and returns its first argument.
"""
from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, GetCoreSchemaHandler
from pydantic_core import core_schema

JSONObject = dict[str, Any]
"""A decoded JSON object."""


# ---------------------------------------------------------------------------
# WireModel
# ---------------------------------------------------------------------------


class WireModel(BaseModel):
    """Immutable base for payload records.

    Fields are declared under Python names; fields whose wire key differs
    carry an ``alias``.  Both names are accepted on construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> JSONObject:
        """Return the JSON-compatible wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_wire_json(self) -> bytes:
        """Return the compact JSON wire representation as UTF-8 bytes."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------


def _format_seconds(seconds: float) -> str:
    # Fixed-point with nanosecond precision; the Duration JSON form has no exponent.
    return f"{seconds:.9f}".rstrip("0").rstrip(".")


class AndroidDuration:
    """Android duration, encoded as seconds with an ``s`` suffix.

    ``AndroidDuration(3.5)`` encodes as ``"3.5s"``; integral values drop
    the fractional part, so ``AndroidDuration(3.0)`` encodes as ``"3s"``.
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: float) -> None:
        object.__setattr__(self, "_seconds", float(seconds))

    @classmethod
    def from_secs(cls, seconds: float) -> AndroidDuration:
        return cls(seconds)

    @property
    def seconds(self) -> float:
        return self._seconds

    def encode(self) -> str:
        """Return the wire form, e.g. ``"3.5s"``."""
        return f"{_format_seconds(self._seconds)}s"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AndroidDuration):
            return self._seconds == other._seconds
        return NotImplemented

    def __hash__(self) -> int:
        return hash((AndroidDuration, self._seconds))

    def __repr__(self) -> str:
        return f"AndroidDuration({self._seconds!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_android_duration,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.encode(),
                when_used="json",
            ),
        )


def _coerce_android_duration(value: Any) -> AndroidDuration:
    if isinstance(value, AndroidDuration):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return AndroidDuration(value)
    raise ValueError(f"Expected AndroidDuration or seconds, got {type(value).__name__}")


class ApnsDuration:
    """APNs duration (``apns-expiration``), encoded as whole seconds.

    ``ApnsDuration(3600)`` encodes as ``"3600"`` -- no suffix.
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int) -> None:
        if isinstance(seconds, bool) or int(seconds) != seconds or seconds < 0:
            raise ValueError(f"ApnsDuration requires whole non-negative seconds, got {seconds!r}")
        object.__setattr__(self, "_seconds", int(seconds))

    @classmethod
    def from_secs(cls, seconds: int) -> ApnsDuration:
        return cls(seconds)

    @property
    def seconds(self) -> int:
        return self._seconds

    def encode(self) -> str:
        """Return the wire form, e.g. ``"3600"``."""
        return str(self._seconds)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ApnsDuration):
            return self._seconds == other._seconds
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ApnsDuration, self._seconds))

    def __repr__(self) -> str:
        return f"ApnsDuration({self._seconds!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_apns_duration,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.encode(),
                when_used="json",
            ),
        )


def _coerce_apns_duration(value: Any) -> ApnsDuration:
    if isinstance(value, ApnsDuration):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ApnsDuration(value)
    raise ValueError(f"Expected ApnsDuration or whole seconds, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------


class Flag(enum.IntEnum):
    """Two-state flag, encoded as the JSON integers ``1`` / ``0``.

    Consumers of the APNs payload schema expect integers here; a JSON
    boolean is rejected.
    """

    OFF = 0
    ON = 1

    @classmethod
    def of(cls, on: bool) -> Flag:
        return cls.ON if on else cls.OFF


# ---------------------------------------------------------------------------
# Deep merge
# ---------------------------------------------------------------------------


def deep_merge(base: JSONObject, overlay: JSONObject) -> JSONObject:
    """Merge *overlay* into *base* recursively and return *base*.

    For each key in *overlay*: if both values are JSON objects they are
    merged key by key; otherwise the overlay value replaces the base value.
    """
    for key, value in overlay.items():
        existing = base.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            deep_merge(existing, value)
        else:
            base[key] = value
    return base


__all__ = [
    "AndroidDuration",
    "ApnsDuration",
    "Flag",
    "JSONObject",
    "WireModel",
    "deep_merge",
]
