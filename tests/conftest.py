# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logout

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from coreason_logout.configuration import ProviderConfiguration
from coreason_logout.end_session_request import EndSessionRequest

ENDPOINT = "https://idp.example/logout?foo=1"
REDIRECT_URI = "app://callback"


@pytest.fixture(autouse=True)
def clean_environment() -> Generator[None, None, None]:
    """
    Removes COREASON_LOGOUT_* and AUTHLIB_INSECURE_TRANSPORT variables so settings and
    HTTPS checks only see what each test sets explicitly.
    """
    with patch.dict(os.environ):
        for key in list(os.environ):
            if key.upper().startswith("COREASON_LOGOUT_") or key == "AUTHLIB_INSECURE_TRANSPORT":
                del os.environ[key]
        yield


@pytest.fixture
def configuration() -> ProviderConfiguration:
    return ProviderConfiguration(
        authorization_endpoint="https://idp.example/authorize",
        token_endpoint="https://idp.example/token",
        end_session_endpoint=ENDPOINT,
    )


@pytest.fixture
def end_session_request(configuration: ProviderConfiguration) -> EndSessionRequest:
    return EndSessionRequest(configuration=configuration, redirect_uri=REDIRECT_URI)
