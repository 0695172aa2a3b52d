"""fcm-rest error hierarchy.

Two layers of exceptions are defined here:

* **RPCError** -- transport-level outcomes raised by the request pipeline
  (:mod:`fcm_rest.pipeline`).  These are internal: callers of the public
  APIs never see them directly, only as the ``__cause__`` of a domain
  error.
* **Domain errors** -- one closed family per feature area
  (:class:`FCMError` for messaging, :class:`TopicManagementError` for
  Instance-ID topic management).  Each family provides a total
  ``from_rpc_error`` conversion that may collapse or rename variants.

Hierarchy
---------
::

    RPCError
    +-- RPCUnauthorized
    +-- BuildRequestFailure
    +-- HttpRequestFailure
    +-- DecodeFailure
    +-- DeserializeFailure
    +-- InvalidRequest
    +-- InternalServerError
    +-- UnknownStatus

    FCMError
    +-- FCMInternalRequestError
    +-- FCMInternalResponseError
    +-- FCMUnauthorized
    +-- FCMInvalidRequestDescriptive
    +-- FCMInvalidRequest
    +-- FCMRetryableInternal
    +-- FCMInternal
    +-- FCMUnknown

    TopicManagementError
    +-- TopicUnauthorized
    +-- TopicInvalidRequest
    +-- TopicServerError
    +-- TopicInternalRequestError
    +-- TopicInternalResponseError
    +-- TopicUnknown

Usage
-----
Catch by feature area::

    try:
        await client.send(message)
    except FCMRetryableInternal as exc:
        schedule_retry(exc.retry_after)
    except FCMError:
        ...
"""
from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class FCMRestError(Exception):
    """Base exception for every error raised by fcm-rest.

    Attributes
    ----------
    code : str
        Stable machine-readable error code, e.g. ``"RPC_UNAUTHORIZED"``.
    message : str
        Human-readable description (MUST NOT contain bearer tokens).
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    """

    code: str = "FCM_REST_ERROR"
    message: str = "Unknown fcm-rest error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error for structured logs or API responses."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            payload["detail"] = self.details
        return {"error": payload}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(FCMRestError, ValueError):
    """The client was configured without a value an operation requires."""

    code = "CONFIGURATION_ERROR"
    message = "Invalid fcm-rest configuration"


# ===================================================================
# RPCError -- transport-level outcomes
# ===================================================================


class RPCError(FCMRestError):
    """Internal, transport-agnostic outcome of a pipeline execution.

    Prefer the feature-level errors (:class:`FCMError`,
    :class:`TopicManagementError`) in application code.
    """

    code = "RPC_ERROR"
    message = "RPC failed"


class RPCUnauthorized(RPCError):
    """The bearer token could not be obtained, or the server answered 401."""

    code = "RPC_UNAUTHORIZED"
    message = "Unauthorized"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class BuildRequestFailure(RPCError):
    """The request (URI, headers, body) could not be constructed."""

    code = "RPC_BUILD_REQUEST_FAILURE"
    message = "Unable to build request"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unable to build request: {reason}")


class HttpRequestFailure(RPCError):
    """The transport failed to complete the HTTP exchange."""

    code = "RPC_HTTP_REQUEST_FAILURE"
    message = "Unable to process http request"


class DecodeFailure(RPCError):
    """The response body could not be read as bytes."""

    code = "RPC_DECODE_FAILURE"
    message = "Unable to decode response body bytes"


class DeserializeFailure(RPCError):
    """The response body did not parse into the expected response type.

    ``source`` keeps the raw body text for diagnostics.
    """

    code = "RPC_DESERIALIZE_FAILURE"
    message = "Unable to deserialize response body"

    def __init__(self, reason: str, source: str) -> None:
        self.reason = reason
        self.source = source
        super().__init__(
            f"Unable to deserialize response body: {reason}",
            details={"source": source},
        )


class InvalidRequest(RPCError):
    """The server rejected the request with a 4xx status."""

    code = "RPC_INVALID_REQUEST"
    message = "Invalid request"

    def __init__(self, details: str | None = None) -> None:
        self.request_details = details
        if details is None:
            super().__init__()
        else:
            super().__init__(f"Invalid request: {details}")


class InternalServerError(RPCError):
    """The server answered with a 5xx status.

    ``retry_after`` is set only when the response carried a
    ``Retry-After`` header with an integer number of seconds.
    """

    code = "RPC_INTERNAL"
    message = "Internal server error"

    def __init__(self, retry_after: timedelta | None = None) -> None:
        self.retry_after = retry_after
        if retry_after is None:
            super().__init__()
        else:
            super().__init__(
                f"Internal server error (retry after {int(retry_after.total_seconds())}s)"
            )


class UnknownStatus(RPCError):
    """The server answered with a status other than 200 or a 4xx/5xx class."""

    code = "RPC_UNKNOWN"
    message = "Unknown response status"

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(
            f"Unknown response status: {status_code}",
            details={"status_code": status_code},
        )


# ===================================================================
# Domain error protocol
# ===================================================================


class DomainError(Protocol):
    """A feature-level error family that can absorb any :class:`RPCError`."""

    @classmethod
    def from_rpc_error(cls, error: RPCError) -> FCMRestError:
        ...


# ===================================================================
# FCMError -- messaging (send / validate)
# ===================================================================


class FCMError(FCMRestError):
    """Base class for errors returned by the FCM messaging endpoints."""

    code = "FCM_ERROR"
    message = "FCM request failed"

    @classmethod
    def from_rpc_error(cls, error: RPCError) -> FCMError:
        """Map an :class:`RPCError` onto the messaging error family."""
        if isinstance(error, BuildRequestFailure):
            return FCMInternalRequestError(error.reason)
        if isinstance(error, RPCUnauthorized):
            return FCMUnauthorized(error.reason)
        if isinstance(error, HttpRequestFailure):
            return FCMInternalRequestError("unable to process http request")
        if isinstance(error, DecodeFailure):
            return FCMInternalResponseError("unable to decode response body bytes")
        if isinstance(error, DeserializeFailure):
            return FCMInternalResponseError(
                "unable to deserialize response body to type: "
                f"{error.reason}: {error.source}"
            )
        if isinstance(error, InvalidRequest):
            if error.request_details is not None:
                return FCMInvalidRequestDescriptive(error.request_details)
            return FCMInvalidRequest()
        if isinstance(error, InternalServerError):
            if error.retry_after is not None:
                return FCMRetryableInternal(error.retry_after)
            return FCMInternal()
        if isinstance(error, UnknownStatus):
            return FCMUnknown(error.status_code)
        return FCMUnknown(0, hint=str(error))


class FCMInternalRequestError(FCMError):
    """The request never reached FCM."""

    code = "FCM_INTERNAL_REQUEST_ERROR"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class FCMInternalResponseError(FCMError):
    """FCM answered, but the response could not be read or decoded."""

    code = "FCM_INTERNAL_RESPONSE_ERROR"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class FCMUnauthorized(FCMError):
    code = "FCM_UNAUTHORIZED"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class FCMInvalidRequestDescriptive(FCMError):
    """FCM rejected the message and explained why in the response body."""

    code = "FCM_INVALID_REQUEST"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class FCMInvalidRequest(FCMError):
    code = "FCM_INVALID_REQUEST"
    message = "Invalid request"


class FCMRetryableInternal(FCMError):
    """FCM failed with a 5xx and suggested a retry delay."""

    code = "FCM_RETRYABLE_INTERNAL"

    def __init__(self, retry_after: timedelta) -> None:
        self.retry_after = retry_after
        super().__init__(
            f"FCM internal error, retry after {int(retry_after.total_seconds())}s",
            details={"retry_after_seconds": int(retry_after.total_seconds())},
        )


class FCMInternal(FCMError):
    code = "FCM_INTERNAL"
    message = "FCM internal error"


class FCMUnknown(FCMError):
    code = "FCM_UNKNOWN"

    def __init__(self, status_code: int, hint: str | None = None) -> None:
        self.status_code = status_code
        self.hint = hint
        super().__init__(
            f"Unknown FCM response status: {status_code}",
            details={"status_code": status_code},
        )


# ===================================================================
# TopicManagementError -- Instance-ID topic management
# ===================================================================


class TopicManagementError(FCMRestError):
    """Base class for errors returned by the Instance-ID endpoints."""

    code = "TOPIC_MANAGEMENT_ERROR"
    message = "Topic management request failed"

    @classmethod
    def from_rpc_error(cls, error: RPCError) -> TopicManagementError:
        """Map an :class:`RPCError` onto the topic-management error family.

        Request-side and response-side failures are collapsed into one
        variant each; the original message is preserved.
        """
        if isinstance(error, (BuildRequestFailure, HttpRequestFailure)):
            return TopicInternalRequestError(error.message)
        if isinstance(error, (DecodeFailure, DeserializeFailure)):
            return TopicInternalResponseError(error.message)
        if isinstance(error, RPCUnauthorized):
            return TopicUnauthorized(error.reason)
        if isinstance(error, InvalidRequest):
            return TopicInvalidRequest(error.request_details)
        if isinstance(error, InternalServerError):
            return TopicServerError(error.retry_after)
        if isinstance(error, UnknownStatus):
            return TopicUnknown(error.status_code)
        return TopicUnknown(None)


class TopicUnauthorized(TopicManagementError):
    code = "TOPIC_UNAUTHORIZED"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class TopicInvalidRequest(TopicManagementError):
    code = "TOPIC_INVALID_REQUEST"
    message = "Invalid request"

    def __init__(self, details: str | None = None) -> None:
        self.request_details = details
        super().__init__(None if details is None else f"Invalid request: {details}")


class TopicServerError(TopicManagementError):
    code = "TOPIC_SERVER_ERROR"
    message = "Instance ID server error"

    def __init__(self, retry_after: timedelta | None = None) -> None:
        self.retry_after = retry_after
        super().__init__()


class TopicInternalRequestError(TopicManagementError):
    code = "TOPIC_INTERNAL_REQUEST_ERROR"


class TopicInternalResponseError(TopicManagementError):
    code = "TOPIC_INTERNAL_RESPONSE_ERROR"


class TopicUnknown(TopicManagementError):
    code = "TOPIC_UNKNOWN"
    message = "Unknown Instance ID response status"

    def __init__(self, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            details={} if status_code is None else {"status_code": status_code},
        )


__all__ = [
    "BuildRequestFailure",
    "ConfigurationError",
    "DecodeFailure",
    "DeserializeFailure",
    "DomainError",
    "FCMError",
    "FCMInternal",
    "FCMInternalRequestError",
    "FCMInternalResponseError",
    "FCMInvalidRequest",
    "FCMInvalidRequestDescriptive",
    "FCMRestError",
    "FCMRetryableInternal",
    "FCMUnauthorized",
    "FCMUnknown",
    "HttpRequestFailure",
    "InternalServerError",
    "InvalidRequest",
    "RPCError",
    "RPCUnauthorized",
    "TopicInternalRequestError",
    "TopicInternalResponseError",
    "TopicInvalidRequest",
    "TopicManagementError",
    "TopicServerError",
    "TopicUnauthorized",
    "TopicUnknown",
    "UnknownStatus",
]
