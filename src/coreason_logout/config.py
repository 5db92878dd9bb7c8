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
Configuration for the coreason-logout package.
"""

from authlib.common.security import is_secure_transport
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coreason_logout.configuration import ProviderConfiguration


class CoreasonLogoutConfig(BaseSettings):
    """
    Configuration settings for coreason-logout.

    Attributes:
        authorization_endpoint (str): The provider's authorization endpoint.
        token_endpoint (str): The provider's token endpoint.
        end_session_endpoint (str): The provider's end session endpoint.
        registration_endpoint (str | None): The provider's registration endpoint.
        post_logout_redirect_uri (str | None): Default redirect URI for end session requests.
        unsafe_local_dev (bool): Allows plain HTTP provider endpoints. Local testing only.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_LOGOUT_",
        case_sensitive=False,
    )

    # Declared first so endpoint validators can read it from info.data
    unsafe_local_dev: bool = False

    authorization_endpoint: str
    token_endpoint: str
    end_session_endpoint: str
    registration_endpoint: str | None = None
    post_logout_redirect_uri: str | None = Field(
        default=None, description="Redirect URI used when a request does not name one."
    )

    @field_validator(
        "authorization_endpoint", "token_endpoint", "end_session_endpoint", "registration_endpoint", mode="after"
    )
    @classmethod
    def validate_https(cls, v: str | None, info: ValidationInfo) -> str | None:
        """
        Ensures provider endpoints use HTTPS, unless strictly opted out for local dev.
        """
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError(f"'{info.field_name}' cannot be empty")
        if not is_secure_transport(v) and not info.data.get("unsafe_local_dev", False):
            raise ValueError(
                f"'{info.field_name}' MUST use the https scheme. Set 'unsafe_local_dev=True' only for local testing."
            )
        return v

    def provider_configuration(self) -> ProviderConfiguration:
        """
        Returns the provider configuration described by these settings.
        """
        return ProviderConfiguration(
            authorization_endpoint=self.authorization_endpoint,
            token_endpoint=self.token_endpoint,
            registration_endpoint=self.registration_endpoint,
            end_session_endpoint=self.end_session_endpoint,
        )
