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
OpenID Connect end session (RP-initiated logout) requests and responses for OAuth2/OIDC clients.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import CoreasonLogoutConfig
from .configuration import ProviderConfiguration, ProviderConfigurationCodec
from .end_session_request import EndSessionRequest
from .end_session_response import EXTRA_RESPONSE, EndSessionResponse, EndSessionResponseBuilder
from .exceptions import (
    CoreasonLogoutError,
    EndSessionMismatchError,
    InvalidArgumentError,
    MalformedDocumentError,
    MalformedEnvelopeError,
)
from .manager import EndSessionManager

__all__ = [
    "EXTRA_RESPONSE",
    "CoreasonLogoutConfig",
    "CoreasonLogoutError",
    "EndSessionManager",
    "EndSessionMismatchError",
    "EndSessionRequest",
    "EndSessionResponse",
    "EndSessionResponseBuilder",
    "InvalidArgumentError",
    "MalformedDocumentError",
    "MalformedEnvelopeError",
    "ProviderConfiguration",
    "ProviderConfigurationCodec",
]
