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
Tests for carrying end session responses in transport envelopes.
"""

import json

import pytest

from coreason_logout.end_session_request import EndSessionRequest
from coreason_logout.end_session_response import EXTRA_RESPONSE, EndSessionResponse, EndSessionResponseBuilder
from coreason_logout.exceptions import InvalidArgumentError, MalformedDocumentError, MalformedEnvelopeError


@pytest.fixture
def response(end_session_request: EndSessionRequest) -> EndSessionResponse:
    return EndSessionResponseBuilder(end_session_request).build()


def test_envelope_key_is_namespaced() -> None:
    """The envelope key is namespaced to the package."""
    assert EXTRA_RESPONSE == "coreason_logout.EndSessionResponse"


def test_to_envelope(response: EndSessionResponse) -> None:
    """Test the envelope holds a single entry with the text-encoded response."""
    envelope = response.to_envelope()
    assert list(envelope) == [EXTRA_RESPONSE]
    assert json.loads(envelope[EXTRA_RESPONSE]) == response.serialize()


def test_envelope_round_trip(response: EndSessionResponse) -> None:
    """Test that from_envelope reads back what to_envelope produces."""
    assert EndSessionResponse.from_envelope(response.to_envelope()) == response


def test_write_to_envelope_keeps_other_entries(response: EndSessionResponse) -> None:
    """Writing into a caller-owned envelope leaves unrelated data alone."""
    envelope = {"unrelated": "value"}
    assert response.write_to_envelope(envelope) is envelope
    assert envelope["unrelated"] == "value"
    assert EndSessionResponse.from_envelope(envelope) == response


def test_write_to_envelope_requires_envelope(response: EndSessionResponse) -> None:
    """Test that a None envelope is rejected."""
    with pytest.raises(InvalidArgumentError):
        response.write_to_envelope(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("envelope", [{}, {"unrelated": "value"}, {"coreason_logout.Other": "{}"}])
def test_from_envelope_absent(envelope: dict[str, str]) -> None:
    """An envelope without the response key yields None, not an error."""
    assert EndSessionResponse.from_envelope(envelope) is None


def test_from_envelope_requires_envelope() -> None:
    """Test that a None envelope is rejected."""
    with pytest.raises(InvalidArgumentError):
        EndSessionResponse.from_envelope(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value",
    [
        "not json",
        "",
        "[]",
        "{}",
        '{"request": {}}',
        '{"request": {"configuration": {}, "redirectUri": "app://callback"}}',
        None,
        42,
        {"request": {}},
        "[" * 100000,
        '{"request": ' * 100000,
        b'{"request": "\xff"}',
    ],
)
def test_from_envelope_malformed(value: object) -> None:
    """A present but undecodable value is a hard failure."""
    with pytest.raises(MalformedEnvelopeError) as excinfo:
        EndSessionResponse.from_envelope({EXTRA_RESPONSE: value})

    assert not isinstance(excinfo.value, MalformedDocumentError)
    assert isinstance(excinfo.value.__cause__, MalformedDocumentError)
