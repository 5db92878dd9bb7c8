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
EndSessionRequest: an OpenID Connect RP-initiated logout request.
"""

from typing import Any
from urllib.parse import urlsplit, urlunsplit

from authlib.common.urls import url_encode
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from coreason_logout.configuration import ProviderConfiguration, ProviderConfigurationCodec
from coreason_logout.exceptions import InvalidArgumentError
from coreason_logout.models_internal import EndSessionRequestDocument
from coreason_logout.utils.json_util import dumps, loads_object, parse_document

PARAM_REDIRECT_URI = "redirect_uri"

KEY_CONFIGURATION = "configuration"
KEY_REDIRECT_URI = "redirectUri"


class EndSessionRequest(BaseModel):
    """
    An end session request, ready to be dispatched to the provider's end session endpoint.

    The model is frozen. The redirect URI is kept as given; it is not parsed or validated
    until the request is dispatched.

    Attributes:
        configuration (ProviderConfigurationCodec): The provider configuration. Shared, not copied.
        redirect_uri (str): The client's redirect URI.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    configuration: ProviderConfigurationCodec = Field(..., description="The provider configuration.")
    redirect_uri: str = Field(..., min_length=1, description="The client's redirect URI.")

    def __init__(
        self,
        configuration: ProviderConfigurationCodec | None = None,
        redirect_uri: str | None = None,
        **data: Any,
    ) -> None:
        if configuration is None:
            raise InvalidArgumentError("configuration cannot be None")
        if not redirect_uri:
            raise InvalidArgumentError("redirect_uri cannot be empty")

        try:
            super().__init__(configuration=configuration, redirect_uri=redirect_uri, **data)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid end session request: {e}") from e

    def to_dispatch_uri(self) -> str:
        """
        Produces the URI the user agent is sent to in order to perform the end session request.

        The redirect URI is appended to the end session endpoint as the `redirect_uri` query
        parameter. The query already present on the endpoint is kept byte for byte.

        Raises:
            InvalidArgumentError: If the configuration has no end session endpoint.
        """
        endpoint = self.configuration.end_session_endpoint
        if not endpoint:
            raise InvalidArgumentError("Provider configuration does not define an end_session_endpoint")
        parts = urlsplit(endpoint)
        param = url_encode([(PARAM_REDIRECT_URI, self.redirect_uri)])
        query = f"{parts.query}&{param}" if parts.query else param
        return urlunsplit(parts._replace(query=query))

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "EndSessionRequest":
        """
        Returns a copy of this request. Updated fields go through the same checks as construction.

        Raises:
            InvalidArgumentError: If the update leaves the request without a configuration or redirect URI.
        """
        copied = super().model_copy(deep=deep)
        values = {"configuration": copied.configuration, "redirect_uri": copied.redirect_uri, **(update or {})}
        return type(self)(**values)

    def serialize(self) -> dict[str, Any]:
        """
        Produces the JSON document of this request, for persistent storage or local transmission.
        """
        return {
            KEY_CONFIGURATION: self.configuration.to_json(),
            KEY_REDIRECT_URI: self.redirect_uri,
        }

    def serialize_to_text(self) -> str:
        """Text form of `serialize`."""
        return dumps(self.serialize())

    @classmethod
    def deserialize(
        cls,
        document: Any,
        configuration_cls: type[ProviderConfigurationCodec] = ProviderConfiguration,
    ) -> "EndSessionRequest":
        """
        Reads a request from a JSON document produced by `serialize`.

        Args:
            document: The decoded JSON object.
            configuration_cls: The codec used for the nested configuration document.

        Returns:
            EndSessionRequest: The reconstructed request.

        Raises:
            MalformedDocumentError: If the document does not match the expected structure.
                Errors raised by the configuration codec propagate unchanged.
        """
        parsed = parse_document(EndSessionRequestDocument, document, "end session request")
        return cls(
            configuration=configuration_cls.from_json(parsed.configuration),
            redirect_uri=parsed.redirect_uri,
        )

    @classmethod
    def deserialize_from_text(
        cls,
        text: str,
        configuration_cls: type[ProviderConfigurationCodec] = ProviderConfiguration,
    ) -> "EndSessionRequest":
        """
        Reads a request from the text produced by `serialize_to_text`.

        Raises:
            MalformedDocumentError: If the text is not a JSON object or does not match the expected structure.
        """
        return cls.deserialize(loads_object(text, "end session request"), configuration_cls)
