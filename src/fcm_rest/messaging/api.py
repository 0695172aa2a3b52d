"""FCM HTTP v1 messaging endpoints (``projects.messages.send``)."""
from __future__ import annotations

from fcm_rest.core.errors import FCMError
from fcm_rest.messaging.message import Message, MessageOutput, MessagePayload
from fcm_rest.pipeline import RequestPipeline

DEFAULT_FCM_BASE_URL: str = "https://fcm.googleapis.com/v1"


class MessagingAPI:
    """Send and validate messages for one Firebase project.

    Parameters
    ----------
    pipeline:
        Shared authenticated-request pipeline.
    project_id:
        Google Cloud project that owns the Firebase app.
    base_url:
        Base URL of the FCM HTTP v1 API.
    """

    def __init__(
        self,
        pipeline: RequestPipeline,
        project_id: str,
        *,
        base_url: str = DEFAULT_FCM_BASE_URL,
    ) -> None:
        self._pipeline = pipeline
        self._project_id = project_id
        self._base_url = base_url.rstrip("/")

    @property
    def send_endpoint(self) -> str:
        return f"{self._base_url}/projects/{self._project_id}/messages:send"

    async def send(self, message: Message) -> MessageOutput:
        """Send *message*.

        Raises
        ------
        FCMError
            On any failure; see :mod:`fcm_rest.core.errors`.
        """
        return await self._post(MessagePayload(validate_only=False, message=message))

    async def validate(self, message: Message) -> MessageOutput:
        """Validate *message* with a dry run; nothing is delivered."""
        return await self._post(MessagePayload(validate_only=True, message=message))

    async def _post(self, payload: MessagePayload) -> MessageOutput:
        return await self._pipeline.execute(
            "POST",
            self.send_endpoint,
            payload,
            response_type=MessageOutput,
            error_type=FCMError,
        )


__all__ = ["DEFAULT_FCM_BASE_URL", "MessagingAPI"]
