"""Request and response records of the Instance ID (IID) API.

``TopicInfoResponse`` has no discriminant field: the Android and iOS
shapes are told apart by which fields are present.  Decoding tries
:class:`AndroidTopicInfo` first and falls back to :class:`IosTopicInfo`;
the first shape whose required fields all match wins.  A body carrying
both ``appSigner`` and ``applicationVersion`` therefore decodes as
Android.
"""
from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from fcm_rest.wire.encoding import WireModel

# ---------------------------------------------------------------------------
# Topic subscription (batchAdd / batchRemove)
# ---------------------------------------------------------------------------


class TopicManagementRequest(WireModel):
    """Body of ``iid/v1:batchAdd`` and ``iid/v1:batchRemove``."""

    to: str = Field(description="Topic path, ``/topics/{topic}``.")
    registration_tokens: list[str]

    @classmethod
    def subscribe(cls, topic: str, tokens: list[str]) -> TopicManagementRequest:
        return cls(to=f"/topics/{topic}", registration_tokens=tokens)

    @classmethod
    def unsubscribe(cls, topic: str, tokens: list[str]) -> TopicManagementRequest:
        return cls(to=f"/topics/{topic}", registration_tokens=tokens)


class TopicManagementResponse(BaseModel):
    """Per-token results, in request order.

    Each entry is ``{}`` on success or ``{"error": "<CODE>"}``, e.g.
    ``{"error": "INVALID_ARGUMENT"}``.
    """

    model_config = ConfigDict(frozen=True)

    results: list[dict[str, str]]

    @property
    def errors(self) -> list[str | None]:
        """The ``error`` code of each result, or ``None`` where it succeeded."""
        return [result.get("error") for result in self.results]


# ---------------------------------------------------------------------------
# Token info (iid/info)
# ---------------------------------------------------------------------------


class _InfoModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Rel(_InfoModel):
    """Topic subscriptions of a token: ``{topic_name: {"addDate": "YYYY-MM-DD"}}``."""

    topics: dict[str, dict[str, str]] = Field(default_factory=dict)


class AndroidTopicInfo(_InfoModel):
    """Token info for an Android app instance."""

    application: str
    authorized_entity: str = Field(alias="authorizedEntity")
    platform: str
    app_signer: str = Field(alias="appSigner")
    application_version: str | None = Field(default=None, alias="applicationVersion")
    attest_status: str | None = Field(default=None, alias="attestStatus")
    connection_type: str | None = Field(default=None, alias="connectionType")
    connect_date: str | None = Field(default=None, alias="connectDate")
    rel: Rel | None = None


class IosTopicInfo(_InfoModel):
    """Token info for an iOS app instance."""

    application: str
    authorized_entity: str = Field(alias="authorizedEntity")
    platform: str
    application_version: str = Field(alias="applicationVersion")
    gmi_registration_id: str | None = Field(default=None, alias="gmiRegistrationId")
    attest_status: str | None = Field(default=None, alias="attestStatus")
    scope: str | None = None
    rel: Rel | None = None


TopicInfoResponse = Annotated[
    AndroidTopicInfo | IosTopicInfo,
    Field(union_mode="left_to_right"),
]
"""Response of ``iid/info/{token}``: Android shape first, then iOS."""


# ---------------------------------------------------------------------------
# APNs token import (batchImport)
# ---------------------------------------------------------------------------


class ApnsImportRequest(WireModel):
    """Body of ``iid/v1:batchImport``."""

    application: str = Field(description="Bundle id of the iOS app.")
    sandbox: bool = False
    apns_tokens: list[str]


class ApnsImportResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    apns_token: str = Field(validation_alias=AliasChoices("apns_token", "apn_token"))
    status: str
    registration_token: str | None = None


class ApnsImportResponse(BaseModel):
    """Per-token import results, in request order."""

    model_config = ConfigDict(frozen=True)

    results: list[ApnsImportResult]


__all__ = [
    "AndroidTopicInfo",
    "ApnsImportRequest",
    "ApnsImportResponse",
    "ApnsImportResult",
    "IosTopicInfo",
    "Rel",
    "TopicInfoResponse",
    "TopicManagementRequest",
    "TopicManagementResponse",
]
