"""fcm-rest client -- the main entry point.

:class:`FCMClient` composes one :class:`~fcm_rest.pipeline.RequestPipeline`
with the messaging and topic-management APIs.  All three share the same
token provider and transport, so one client instance may serve any number
of concurrent requests.

Usage
-----
::

    from fcm_rest import FCMClient, Notification, TopicMessage

    async with FCMClient.from_env() as client:
        await client.send(
            TopicMessage(topic="news", notification=Notification(title="Hello"))
        )
        await client.register_tokens_to_topic("news", ["token_0", "token_1"])
        # => TopicManagementResponse(results=[{}, {"error": "INVALID_ARGUMENT"}])
"""
from __future__ import annotations

from types import TracebackType

from fcm_rest.core.config import FCMClientConfig
from fcm_rest.core.errors import ConfigurationError
from fcm_rest.core.interfaces import TokenProvider, Transport
from fcm_rest.messaging.api import MessagingAPI
from fcm_rest.messaging.message import Message, MessageOutput
from fcm_rest.pipeline import RequestPipeline
from fcm_rest.topic.api import TopicManagementAPI
from fcm_rest.topic.models import (
    ApnsImportResponse,
    TopicInfoResponse,
    TopicManagementResponse,
)
from fcm_rest.wire.http import GoogleAuthTokenProvider, HttpxTransport


class FCMClient:
    """Client for the FCM HTTP v1 and Instance ID APIs.

    Parameters
    ----------
    config:
        Client configuration; read from the environment when omitted.
    token_provider:
        Source of bearer tokens.  Defaults to
        :class:`~fcm_rest.wire.http.GoogleAuthTokenProvider` (Application
        Default Credentials).
    transport:
        HTTP transport.  Defaults to
        :class:`~fcm_rest.wire.http.HttpxTransport`.
    """

    def __init__(
        self,
        config: FCMClientConfig | None = None,
        *,
        token_provider: TokenProvider | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or FCMClientConfig()
        self._transport = transport or HttpxTransport(timeout=self._config.timeout_seconds)
        self._token_provider = token_provider or GoogleAuthTokenProvider(
            scopes=self._config.scopes
        )
        self._pipeline = RequestPipeline(self._token_provider, self._transport)
        self._topics = TopicManagementAPI(self._pipeline, base_url=self._config.iid_base_url)
        self._messaging: MessagingAPI | None = None
        if self._config.project_id:
            self._messaging = MessagingAPI(
                self._pipeline,
                self._config.project_id,
                base_url=self._config.fcm_base_url,
            )

    @classmethod
    def from_env(cls) -> FCMClient:
        """Create a client configured from the environment.

        Raises
        ------
        ConfigurationError
            If no project id is set (``GOOGLE_CLOUD_PROJECT`` /
            ``GCP_PROJECT``).
        """
        config = FCMClientConfig()
        config.require_project_id()
        return cls(config)

    # -- accessors --------------------------------------------------------

    @property
    def config(self) -> FCMClientConfig:
        return self._config

    @property
    def pipeline(self) -> RequestPipeline:
        return self._pipeline

    @property
    def messaging(self) -> MessagingAPI:
        """The messaging API; requires a configured project id."""
        if self._messaging is None:
            raise ConfigurationError(
                "Messaging requires a google project id. "
                "Provide it explicitly or via the GOOGLE_CLOUD_PROJECT env var."
            )
        return self._messaging

    @property
    def topics(self) -> TopicManagementAPI:
        return self._topics

    # -- messaging --------------------------------------------------------

    async def send(self, message: Message) -> MessageOutput:
        """Send *message*; see :meth:`MessagingAPI.send`."""
        return await self.messaging.send(message)

    async def validate(self, message: Message) -> MessageOutput:
        """Validate *message* without delivering it."""
        return await self.messaging.validate(message)

    # -- topic management -------------------------------------------------

    async def register_token_to_topic(self, topic: str, token: str) -> dict[str, str]:
        return await self._topics.register_token_to_topic(topic, token)

    async def register_tokens_to_topic(
        self, topic: str, tokens: list[str]
    ) -> TopicManagementResponse:
        return await self._topics.register_tokens_to_topic(topic, tokens)

    async def unregister_tokens_from_topic(
        self, topic: str, tokens: list[str]
    ) -> TopicManagementResponse:
        return await self._topics.unregister_tokens_from_topic(topic, tokens)

    async def get_info_by_iid_token(
        self, token: str, details: bool = False
    ) -> TopicInfoResponse:
        return await self._topics.get_info_by_iid_token(token, details)

    async def import_apns_tokens(
        self,
        application: str,
        apns_tokens: list[str],
        *,
        sandbox: bool = False,
    ) -> ApnsImportResponse:
        return await self._topics.import_apns_tokens(application, apns_tokens, sandbox=sandbox)

    # -- lifecycle --------------------------------------------------------

    async def aclose(self) -> None:
        """Close the transport if it supports closing."""
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> FCMClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["FCMClient"]
