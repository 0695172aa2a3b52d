"""Tests for the fcm-rest error hierarchy.

Covers:

1. **Base error** -- codes, messages, details and ``to_dict``.
2. **FCMError.from_rpc_error** -- one case per transport-level outcome.
3. **TopicManagementError.from_rpc_error** -- collapsed request/response
   variants and passthrough of details.
"""
from __future__ import annotations

from datetime import timedelta

import pytest

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

# =========================================================================
# Base error
# =========================================================================


class TestBaseError:
    """Shared behaviour of every fcm-rest exception."""

    def test_default_message(self) -> None:
        err = FCMInvalidRequest()
        assert err.message == "Invalid request"
        assert str(err) == "Invalid request"

    def test_to_dict_without_details(self) -> None:
        assert FCMInternal().to_dict() == {
            "error": {"code": "FCM_INTERNAL", "message": "FCM internal error"}
        }

    def test_to_dict_with_details(self) -> None:
        payload = UnknownStatus(302).to_dict()
        assert payload["error"]["code"] == "RPC_UNKNOWN"
        assert payload["error"]["detail"] == {"status_code": 302}

    def test_repr(self) -> None:
        assert repr(FCMUnauthorized("nope")) == "FCMUnauthorized(code='FCM_UNAUTHORIZED', message='nope')"

    def test_families_share_base(self) -> None:
        assert issubclass(RPCError, FCMRestError)
        assert issubclass(FCMError, FCMRestError)
        assert issubclass(TopicManagementError, FCMRestError)
        assert not issubclass(FCMError, RPCError)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise ConfigurationError("project_id is required")

    def test_deserialize_failure_keeps_source(self) -> None:
        err = DeserializeFailure("missing field", '{"nam": "x"}')
        assert err.source == '{"nam": "x"}'
        assert err.details == {"source": '{"nam": "x"}'}


# =========================================================================
# FCMError conversion
# =========================================================================


class TestFCMErrorConversion:
    """Every RPCError maps onto exactly one messaging error."""

    def test_build_failure(self) -> None:
        err = FCMError.from_rpc_error(BuildRequestFailure("bad header"))
        assert isinstance(err, FCMInternalRequestError)
        assert err.reason == "bad header"

    def test_unauthorized(self) -> None:
        err = FCMError.from_rpc_error(RPCUnauthorized("unable to get header token"))
        assert isinstance(err, FCMUnauthorized)
        assert err.reason == "unable to get header token"

    def test_http_failure(self) -> None:
        err = FCMError.from_rpc_error(HttpRequestFailure("connection reset"))
        assert isinstance(err, FCMInternalRequestError)
        assert err.reason == "unable to process http request"

    def test_decode_failure(self) -> None:
        err = FCMError.from_rpc_error(DecodeFailure())
        assert isinstance(err, FCMInternalResponseError)
        assert err.reason == "unable to decode response body bytes"

    def test_deserialize_failure_carries_source(self) -> None:
        err = FCMError.from_rpc_error(DeserializeFailure("missing name", "{}"))
        assert isinstance(err, FCMInternalResponseError)
        assert err.reason.startswith("unable to deserialize response body to type: ")
        assert "missing name" in err.reason
        assert err.reason.endswith(": {}")

    def test_invalid_request_with_details(self) -> None:
        err = FCMError.from_rpc_error(InvalidRequest('{"error": {"code": 400}}'))
        assert isinstance(err, FCMInvalidRequestDescriptive)
        assert err.reason == '{"error": {"code": 400}}'

    def test_invalid_request_without_details(self) -> None:
        err = FCMError.from_rpc_error(InvalidRequest())
        assert type(err) is FCMInvalidRequest

    def test_retryable_internal(self) -> None:
        err = FCMError.from_rpc_error(InternalServerError(timedelta(seconds=30)))
        assert isinstance(err, FCMRetryableInternal)
        assert err.retry_after == timedelta(seconds=30)
        assert err.details == {"retry_after_seconds": 30}

    def test_internal_without_retry_after(self) -> None:
        err = FCMError.from_rpc_error(InternalServerError())
        assert type(err) is FCMInternal

    def test_unknown_status(self) -> None:
        err = FCMError.from_rpc_error(UnknownStatus(302))
        assert isinstance(err, FCMUnknown)
        assert err.status_code == 302
        assert err.hint is None

    def test_every_result_is_fcm_error(self) -> None:
        errors: list[RPCError] = [
            BuildRequestFailure("x"),
            RPCUnauthorized("x"),
            HttpRequestFailure(),
            DecodeFailure(),
            DeserializeFailure("x", "y"),
            InvalidRequest("x"),
            InvalidRequest(),
            InternalServerError(timedelta(seconds=1)),
            InternalServerError(),
            UnknownStatus(100),
        ]
        for rpc_error in errors:
            assert isinstance(FCMError.from_rpc_error(rpc_error), FCMError)


# =========================================================================
# TopicManagementError conversion
# =========================================================================


class TestTopicManagementErrorConversion:
    """Every RPCError maps onto exactly one topic-management error."""

    @pytest.mark.parametrize(
        "rpc_error",
        [BuildRequestFailure("bad url"), HttpRequestFailure("timeout")],
    )
    def test_request_side_failures_collapse(self, rpc_error: RPCError) -> None:
        err = TopicManagementError.from_rpc_error(rpc_error)
        assert isinstance(err, TopicInternalRequestError)
        assert err.message == rpc_error.message

    @pytest.mark.parametrize(
        "rpc_error",
        [DecodeFailure(), DeserializeFailure("bad", "[]")],
    )
    def test_response_side_failures_collapse(self, rpc_error: RPCError) -> None:
        err = TopicManagementError.from_rpc_error(rpc_error)
        assert isinstance(err, TopicInternalResponseError)
        assert err.message == rpc_error.message

    def test_unauthorized(self) -> None:
        err = TopicManagementError.from_rpc_error(
            RPCUnauthorized("unable to access firebase resource")
        )
        assert isinstance(err, TopicUnauthorized)
        assert err.reason == "unable to access firebase resource"

    def test_invalid_request_passes_details(self) -> None:
        err = TopicManagementError.from_rpc_error(InvalidRequest("INVALID_ARGUMENT"))
        assert isinstance(err, TopicInvalidRequest)
        assert err.request_details == "INVALID_ARGUMENT"

    def test_invalid_request_without_details(self) -> None:
        err = TopicManagementError.from_rpc_error(InvalidRequest())
        assert isinstance(err, TopicInvalidRequest)
        assert err.request_details is None
        assert err.message == "Invalid request"

    def test_server_error_keeps_retry_after(self) -> None:
        err = TopicManagementError.from_rpc_error(InternalServerError(timedelta(seconds=5)))
        assert isinstance(err, TopicServerError)
        assert err.retry_after == timedelta(seconds=5)

    def test_unknown_status(self) -> None:
        err = TopicManagementError.from_rpc_error(UnknownStatus(304))
        assert isinstance(err, TopicUnknown)
        assert err.status_code == 304
