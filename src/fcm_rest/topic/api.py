"""Instance ID topic-management endpoints.

Every call carries the ``access_token_auth: true`` header, which the
Instance ID API requires when the request is authorised with an OAuth2
access token instead of a legacy server key.
"""
from __future__ import annotations

from fcm_rest.core.errors import TopicManagementError
from fcm_rest.pipeline import RequestPipeline
from fcm_rest.topic.models import (
    ApnsImportRequest,
    ApnsImportResponse,
    TopicInfoResponse,
    TopicManagementRequest,
    TopicManagementResponse,
)

DEFAULT_IID_BASE_URL: str = "https://iid.googleapis.com"

ACCESS_TOKEN_AUTH_HEADER: tuple[str, str] = ("access_token_auth", "true")


class TopicManagementAPI:
    """Subscribe tokens to topics and inspect token registrations.

    Parameters
    ----------
    pipeline:
        Shared authenticated-request pipeline.
    base_url:
        Base URL of the Instance ID API.
    """

    def __init__(
        self,
        pipeline: RequestPipeline,
        *,
        base_url: str = DEFAULT_IID_BASE_URL,
    ) -> None:
        self._pipeline = pipeline
        self._base_url = base_url.rstrip("/")

    # -- endpoints --------------------------------------------------------

    def relation_endpoint(self, token: str, topic: str) -> str:
        return f"{self._base_url}/iid/v1/{token}/rel/topics/{topic}"

    def batch_endpoint(self, action: str) -> str:
        return f"{self._base_url}/iid/v1:{action}"

    def info_endpoint(self, token: str, *, details: bool = False) -> str:
        url = f"{self._base_url}/iid/info/{token}"
        return f"{url}?details=true" if details else url

    # -- operations -------------------------------------------------------

    async def register_token_to_topic(self, topic: str, token: str) -> dict[str, str]:
        """Subscribe a single *token* to *topic*.

        Raises
        ------
        TopicManagementError
            On any failure; an empty or invalid token yields
            :class:`~fcm_rest.core.errors.TopicInvalidRequest`.
        """
        return await self._pipeline.execute(
            "PUT",
            self.relation_endpoint(token, topic),
            response_type=dict[str, str],
            error_type=TopicManagementError,
            extra_headers=[ACCESS_TOKEN_AUTH_HEADER],
        )

    async def register_tokens_to_topic(
        self, topic: str, tokens: list[str]
    ) -> TopicManagementResponse:
        """Subscribe *tokens* to *topic*; results are per token, in order."""
        return await self._batch("batchAdd", TopicManagementRequest.subscribe(topic, tokens))

    async def unregister_tokens_from_topic(
        self, topic: str, tokens: list[str]
    ) -> TopicManagementResponse:
        """Unsubscribe *tokens* from *topic*; results are per token, in order."""
        return await self._batch("batchRemove", TopicManagementRequest.unsubscribe(topic, tokens))

    async def get_info_by_iid_token(
        self, token: str, details: bool = False
    ) -> TopicInfoResponse:
        """Return app and subscription info for *token*.

        With ``details=True`` the response includes ``rel.topics``.
        """
        return await self._pipeline.execute(
            "GET",
            self.info_endpoint(token, details=details),
            response_type=TopicInfoResponse,
            error_type=TopicManagementError,
            extra_headers=[ACCESS_TOKEN_AUTH_HEADER],
        )

    async def import_apns_tokens(
        self,
        application: str,
        apns_tokens: list[str],
        *,
        sandbox: bool = False,
    ) -> ApnsImportResponse:
        """Create registration tokens for existing APNs tokens."""
        return await self._pipeline.execute(
            "POST",
            self.batch_endpoint("batchImport"),
            ApnsImportRequest(application=application, sandbox=sandbox, apns_tokens=apns_tokens),
            response_type=ApnsImportResponse,
            error_type=TopicManagementError,
            extra_headers=[ACCESS_TOKEN_AUTH_HEADER],
        )

    async def _batch(
        self, action: str, request: TopicManagementRequest
    ) -> TopicManagementResponse:
        return await self._pipeline.execute(
            "POST",
            self.batch_endpoint(action),
            request,
            response_type=TopicManagementResponse,
            error_type=TopicManagementError,
            extra_headers=[ACCESS_TOKEN_AUTH_HEADER],
        )


__all__ = ["ACCESS_TOKEN_AUTH_HEADER", "DEFAULT_IID_BASE_URL", "TopicManagementAPI"]
