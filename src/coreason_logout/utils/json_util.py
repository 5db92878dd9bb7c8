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
Helpers shared by the JSON codecs of the end session values.
"""

import json
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from coreason_logout.exceptions import MalformedDocumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


def dumps(document: Mapping[str, Any]) -> str:
    """Encodes a JSON document to text. Key order follows insertion order, so output is stable."""
    return json.dumps(document, ensure_ascii=False)


def loads_object(text: str, kind: str) -> dict[str, Any]:
    """
    Decodes JSON text that must hold an object.

    Args:
        text: The JSON text.
        kind: Name of the expected document, used in error messages.

    Raises:
        MalformedDocumentError: If the text is not valid JSON or not a JSON object.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedDocumentError(f"{kind} JSON must be text, got {type(text).__name__}")
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; deep nesting exhausts the stack
        raise MalformedDocumentError(f"Invalid {kind} JSON: {e}") from e
    return require_object(document, kind)


def require_object(document: Any, kind: str) -> dict[str, Any]:
    """Ensures a decoded document is a JSON object."""
    if document is None:
        raise MalformedDocumentError(f"{kind} document is missing")
    if not isinstance(document, Mapping):
        raise MalformedDocumentError(f"{kind} document must be a JSON object, got {type(document).__name__}")
    return dict(document)


def parse_document(model: type[ModelT], document: Any, kind: str) -> ModelT:
    """
    Validates a JSON object against an internal document model.

    Raises:
        MalformedDocumentError: If the document does not match the model.
    """
    try:
        return model.model_validate(require_object(document, kind))
    except (ValidationError, RecursionError) as e:
        raise MalformedDocumentError(f"Invalid {kind} document: {e}") from e


class FrozenDocument(Mapping[str, Any]):
    """
    Read-only JSON object. Nested objects are FrozenDocuments and arrays are tuples.
    """

    def __init__(self, document: Mapping[str, Any]) -> None:
        self._data = {str(key): freeze(value) for key, value in document.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenDocument({self._data!r})"


def freeze(value: Any) -> Any:
    """Returns a read-only deep copy of a decoded JSON value."""
    if isinstance(value, FrozenDocument):
        return value
    if isinstance(value, Mapping):
        return FrozenDocument(value)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Returns a plain dict/list copy of a value produced by `freeze`."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value
