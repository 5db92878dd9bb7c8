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
EndSessionResponse: the completed end session request, and its transport envelope codec.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from coreason_logout.configuration import ProviderConfiguration, ProviderConfigurationCodec
from coreason_logout.end_session_request import EndSessionRequest
from coreason_logout.exceptions import InvalidArgumentError, MalformedDocumentError, MalformedEnvelopeError
from coreason_logout.models_internal import EndSessionResponseDocument
from coreason_logout.utils.json_util import dumps, loads_object, parse_document
from coreason_logout.utils.logger import logger

# Envelope key under which a serialized response travels between components
EXTRA_RESPONSE = "coreason_logout.EndSessionResponse"

KEY_REQUEST = "request"


class EndSessionResponse(BaseModel):
    """
    A response to an end session request.

    Instances are created with `EndSessionResponseBuilder` or read back from JSON or a
    transport envelope. The model is frozen.

    Attributes:
        request (EndSessionRequest): The end session request this response completes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    request: EndSessionRequest = Field(..., description="The originating end session request.")

    def serialize(self) -> dict[str, Any]:
        """
        Produces the JSON document of this response, for persistent storage or local transmission.
        """
        return {KEY_REQUEST: self.request.serialize()}

    def serialize_to_text(self) -> str:
        """Text form of `serialize`."""
        return dumps(self.serialize())

    @classmethod
    def deserialize(
        cls,
        document: Any,
        configuration_cls: type[ProviderConfigurationCodec] = ProviderConfiguration,
    ) -> "EndSessionResponse":
        """
        Reads a response from a JSON document produced by `serialize`.

        The response is assembled through `EndSessionResponseBuilder`, so builder checks apply.

        Raises:
            MalformedDocumentError: If the `request` field is absent or the nested request is malformed.
        """
        parsed = parse_document(EndSessionResponseDocument, document, "end session response")
        request = EndSessionRequest.deserialize(parsed.request, configuration_cls)
        return EndSessionResponseBuilder(request).build()

    @classmethod
    def deserialize_from_text(
        cls,
        text: str,
        configuration_cls: type[ProviderConfigurationCodec] = ProviderConfiguration,
    ) -> "EndSessionResponse":
        """
        Reads a response from the text produced by `serialize_to_text`.

        Raises:
            MalformedDocumentError: If the text is not a JSON object or does not match the expected structure.
        """
        return cls.deserialize(loads_object(text, "end session response"), configuration_cls)

    def to_envelope(self) -> dict[str, str]:
        """
        Produces a transport envelope holding this response under `EXTRA_RESPONSE`.
        """
        return {EXTRA_RESPONSE: self.serialize_to_text()}

    def write_to_envelope(self, envelope: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """
        Stores this response in a caller-owned envelope. Other entries are left untouched.

        Returns:
            The same envelope, for chaining.
        """
        if envelope is None:
            raise InvalidArgumentError("envelope cannot be None")
        envelope[EXTRA_RESPONSE] = self.serialize_to_text()
        return envelope

    @classmethod
    def from_envelope(
        cls,
        envelope: Mapping[str, Any],
        configuration_cls: type[ProviderConfigurationCodec] = ProviderConfiguration,
    ) -> "EndSessionResponse | None":
        """
        Extracts a response from an envelope produced by `to_envelope` or `write_to_envelope`.

        Args:
            envelope: The transport envelope.
            configuration_cls: The codec used for the nested configuration document.

        Returns:
            EndSessionResponse | None: The response, or None if the envelope carries no end session response.

        Raises:
            InvalidArgumentError: If the envelope is None.
            MalformedEnvelopeError: If the envelope carries the response key with an undecodable value.
        """
        if envelope is None:
            raise InvalidArgumentError("envelope cannot be None")

        if EXTRA_RESPONSE not in envelope:
            return None

        try:
            return cls.deserialize_from_text(envelope[EXTRA_RESPONSE], configuration_cls)
        except MalformedDocumentError as e:
            logger.warning("Envelope contains a malformed end session response")
            raise MalformedEnvelopeError("Envelope contains a malformed end session response") from e


class EndSessionResponseBuilder:
    """
    Assembles an `EndSessionResponse`.

    The builder must be seeded with the originating request. Fields derived from the
    callback redirect URI are layered on with `from_uri` before `build` is called.
    """

    def __init__(self, request: EndSessionRequest) -> None:
        """
        Initialize the builder.

        Args:
            request: The end session request the response completes.

        Raises:
            InvalidArgumentError: If the request is None or not an EndSessionRequest.
        """
        self._request = self._check_request(request)

    @staticmethod
    def _check_request(request: Any) -> EndSessionRequest:
        if request is None:
            raise InvalidArgumentError("end session request cannot be None")
        if not isinstance(request, EndSessionRequest):
            raise InvalidArgumentError(f"Expected an EndSessionRequest, got {type(request).__name__}")
        return request

    def set_request(self, request: EndSessionRequest) -> "EndSessionResponseBuilder":
        """Replaces the originating request."""
        self._request = self._check_request(request)
        return self

    def from_uri(self, uri: str) -> "EndSessionResponseBuilder":
        """
        Extracts end session response parameters from the query portion of a callback redirect URI.

        RP-initiated logout defines no response parameters, so nothing is read into the response.
        """
        if uri is None:
            raise InvalidArgumentError("callback uri cannot be None")
        names = sorted({name for name, _ in parse_qsl(urlsplit(uri).query, keep_blank_values=True)})
        if names:
            logger.debug(f"Ignoring end session callback parameters: {names}")
        return self

    def build(self) -> EndSessionResponse:
        """Builds the EndSessionResponse."""
        return EndSessionResponse(request=self._request)
