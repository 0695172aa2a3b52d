"""fcm-rest client configuration.

Defines the validated configuration model consumed by
:class:`~fcm_rest.client.FCMClient` and the production collaborators in
:mod:`fcm_rest.wire.http`.  Values can be passed explicitly or read from
the environment:

* ``project_id`` -- ``GOOGLE_CLOUD_PROJECT``, falling back to ``GCP_PROJECT``.
* every other field -- ``FCM_<FIELD_NAME>`` (e.g. ``FCM_TIMEOUT_SECONDS``).

Credentials themselves are not configured here; they are discovered by
google-auth (``GOOGLE_APPLICATION_CREDENTIALS``, gcloud user credentials,
or the metadata server).
"""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fcm_rest.core.errors import ConfigurationError

DEFAULT_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/firebase.messaging",
)
"""OAuth2 scopes covering both the FCM v1 and the Instance ID APIs."""


class FCMClientConfig(BaseSettings):
    """Configuration for an :class:`~fcm_rest.client.FCMClient`.

    All fields carry working defaults; only ``project_id`` is needed, and
    only for the messaging endpoints.
    """

    model_config = SettingsConfigDict(
        env_prefix="FCM_",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("project_id", "GOOGLE_CLOUD_PROJECT", "GCP_PROJECT"),
        description="Google Cloud project that owns the Firebase app.",
    )
    scopes: tuple[str, ...] = Field(
        default=DEFAULT_SCOPES,
        description="OAuth2 scopes requested for the bearer token.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Transport timeout for a single HTTP exchange.",
    )
    fcm_base_url: str = Field(
        default="https://fcm.googleapis.com/v1",
        description="Base URL of the FCM HTTP v1 API.",
    )
    iid_base_url: str = Field(
        default="https://iid.googleapis.com",
        description="Base URL of the Instance ID API.",
    )

    def require_project_id(self) -> str:
        """Return ``project_id`` or raise :class:`ConfigurationError`."""
        if not self.project_id:
            raise ConfigurationError(
                "Cannot detect google project id. "
                "Provide it explicitly or via the GOOGLE_CLOUD_PROJECT env var."
            )
        return self.project_id


__all__ = ["DEFAULT_SCOPES", "FCMClientConfig"]
