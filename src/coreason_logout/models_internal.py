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
Internal document models describing the JSON wire shapes.
These are not exposed in the public API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class EndSessionRequestDocument(BaseModel):
    """
    JSON shape of a serialized end session request.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    configuration: dict[str, Any] = Field(..., description="The provider configuration document.")
    redirect_uri: StrictStr = Field(..., alias="redirectUri", min_length=1, description="The client redirect URI.")


class EndSessionResponseDocument(BaseModel):
    """
    JSON shape of a serialized end session response.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    request: dict[str, Any] = Field(..., description="The originating end session request document.")


class DiscoveryDocument(BaseModel):
    """
    Endpoints read from an OIDC discovery document (.well-known/openid-configuration).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    authorization_endpoint: StrictStr = Field(..., min_length=1)
    token_endpoint: StrictStr = Field(..., min_length=1)
    registration_endpoint: StrictStr | None = None
    end_session_endpoint: StrictStr | None = None
