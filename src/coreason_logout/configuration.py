# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logout

"""
Provider configuration: the endpoints of an OAuth2/OIDC provider and their JSON codec.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer, field_validator

from coreason_logout.models_internal import DiscoveryDocument
from coreason_logout.utils.json_util import freeze, parse_document, require_object, thaw


@runtime_checkable
class ProviderConfigurationCodec(Protocol):
    """
    What an end session request needs from a provider configuration.

    Any object exposing these members can back an `EndSessionRequest`. `from_json` is expected
    to raise `MalformedDocumentError` for documents it cannot read.
    """

    @property
    def end_session_endpoint(self) -> str | None: ...

    def to_json(self) -> dict[str, Any]: ...

    @classmethod
    def from_json(cls, document: Any) -> "ProviderConfigurationCodec": ...


class ProviderConfiguration(BaseModel):
    """
    The endpoints of an OAuth2/OIDC provider.

    Configurations are created manually from known endpoint URIs, or from an already-fetched
    OpenID Connect discovery document via `from_discovery`. The model is frozen.

    Attributes:
        authorization_endpoint (str): The authorization endpoint URI.
        token_endpoint (str): The token endpoint URI.
        registration_endpoint (str | None): The dynamic client registration endpoint URI.
        end_session_endpoint (str | None): The end session (logout) endpoint URI.
        discovery_doc (Mapping | None): Read-only copy of the discovery document the configuration was built from.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    authorization_endpoint: StrictStr = Field(..., alias="authorizationEndpoint", min_length=1)
    token_endpoint: StrictStr = Field(..., alias="tokenEndpoint", min_length=1)
    registration_endpoint: StrictStr | None = Field(default=None, alias="registrationEndpoint")
    end_session_endpoint: StrictStr | None = Field(default=None, alias="endSessionEndpoint")
    discovery_doc: Mapping[str, Any] | None = Field(default=None, alias="discoveryDoc")

    @field_validator("discovery_doc", mode="after")
    @classmethod
    def freeze_discovery_doc(cls, v: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        """Stores a read-only deep copy so the frozen model cannot be changed through the document."""
        return None if v is None else freeze(v)

    @field_serializer("discovery_doc")
    def thaw_discovery_doc(self, v: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return None if v is None else thaw(v)

    def to_json(self) -> dict[str, Any]:
        """
        Produces the JSON document of this configuration. Unset optional endpoints are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, document: Any) -> "ProviderConfiguration":
        """
        Reads a configuration from a document produced by `to_json`.

        Raises:
            MalformedDocumentError: If the document does not match the expected structure.
        """
        return parse_document(cls, document, "provider configuration")

    @classmethod
    def from_discovery(cls, document: Any) -> "ProviderConfiguration":
        """
        Builds a configuration from an OpenID Connect discovery document.

        Args:
            document: The parsed .well-known/openid-configuration JSON object.

        Raises:
            MalformedDocumentError: If a required endpoint is missing or not a string.
        """
        raw = require_object(document, "discovery")
        discovery = parse_document(DiscoveryDocument, raw, "discovery")

        return cls(
            authorization_endpoint=discovery.authorization_endpoint,
            token_endpoint=discovery.token_endpoint,
            registration_endpoint=discovery.registration_endpoint,
            end_session_endpoint=discovery.end_session_endpoint,
            discovery_doc=raw,
        )
