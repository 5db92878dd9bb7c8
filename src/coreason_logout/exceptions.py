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
Custom exceptions for the coreason-logout package.
"""


class CoreasonLogoutError(Exception):
    """Base exception for all coreason-logout errors."""


class InvalidArgumentError(CoreasonLogoutError, ValueError):
    """Raised when a required constructor or builder input is missing."""


class MalformedDocumentError(CoreasonLogoutError):
    """
    Raised when a JSON document (or its text form) does not match the expected structure.
    Covers invalid JSON text, missing fields, wrong types and invalid nested configurations.
    """


class MalformedEnvelopeError(CoreasonLogoutError):
    """
    Raised when a transport envelope carries the end session response key but its value
    cannot be decoded. This is a tampering or programming error, not a missing response.
    """


class EndSessionMismatchError(CoreasonLogoutError):
    """Raised when a received end session response does not belong to the persisted request."""
