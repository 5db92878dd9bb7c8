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
EndSessionManager component for orchestrating an RP-initiated logout.
"""

from collections.abc import Mapping
from typing import Any

from coreason_logout.config import CoreasonLogoutConfig
from coreason_logout.configuration import ProviderConfiguration
from coreason_logout.end_session_request import EndSessionRequest
from coreason_logout.end_session_response import EndSessionResponse
from coreason_logout.exceptions import EndSessionMismatchError, InvalidArgumentError
from coreason_logout.utils.logger import logger


class EndSessionManager:
    """
    Ties the end session values to a configured provider.

    Typical use:
        1. `create_request()` and `persist_request()` before leaving the application.
        2. Send the user agent to `dispatch_uri(request)`.
        3. On return, `complete(envelope, expected_request=restore_request(saved))`.
    """

    def __init__(self, config: CoreasonLogoutConfig) -> None:
        """
        Initialize the EndSessionManager.

        Args:
            config: The configuration object.
        """
        self.config = config
        self.provider_configuration: ProviderConfiguration = config.provider_configuration()

    def create_request(self, redirect_uri: str | None = None) -> EndSessionRequest:
        """
        Creates an end session request against the configured provider.

        Args:
            redirect_uri: Where the provider sends the user agent afterwards.
                Defaults to the configured `post_logout_redirect_uri`.

        Raises:
            InvalidArgumentError: If no redirect URI is given or configured.
        """
        redirect_uri = redirect_uri or self.config.post_logout_redirect_uri
        if not redirect_uri:
            raise InvalidArgumentError("A redirect_uri must be given or configured as post_logout_redirect_uri.")

        return EndSessionRequest(configuration=self.provider_configuration, redirect_uri=redirect_uri)

    def dispatch_uri(self, request: EndSessionRequest) -> str:
        """Returns the URI the user agent must be sent to."""
        uri = request.to_dispatch_uri()
        logger.debug(f"Dispatching end session request to {self.provider_configuration.end_session_endpoint}")
        return uri

    def persist_request(self, request: EndSessionRequest) -> str:
        """Serializes a request so it survives the browser round trip."""
        return request.serialize_to_text()

    def restore_request(self, text: str) -> EndSessionRequest:
        """
        Reads back a request stored by `persist_request`.

        Raises:
            MalformedDocumentError: If the stored text is not a valid end session request.
        """
        return EndSessionRequest.deserialize_from_text(text)

    def complete(
        self,
        envelope: Mapping[str, Any],
        expected_request: EndSessionRequest | None = None,
    ) -> EndSessionResponse | None:
        """
        Reads the end session response handed back in a transport envelope.

        Args:
            envelope: The transport envelope received from the dispatching component.
            expected_request: The persisted request, if the caller kept one.

        Returns:
            EndSessionResponse | None: The response, or None if no end session response was dispatched.

        Raises:
            MalformedEnvelopeError: If the envelope carries an undecodable response.
            EndSessionMismatchError: If the response does not belong to `expected_request`.
        """
        response = EndSessionResponse.from_envelope(envelope)
        if response is None:
            logger.debug("No end session response in envelope")
            return None

        if expected_request is not None and response.request != expected_request:
            raise EndSessionMismatchError("End session response does not match the persisted request.")

        logger.debug("End session completed")
        return response
