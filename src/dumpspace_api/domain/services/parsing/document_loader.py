#!/usr/bin/env python3

"""Decoding of document text into the top-level JSON object."""

import json
from collections.abc import Callable
from typing import Any

from ....errors import SchemaError
from .records import expect_list, expect_object


def _unique_keys(document: str) -> Callable[[list[tuple[str, Any]]], dict[str, Any]]:
    """Build an ``object_pairs_hook`` that rejects repeated keys in one object."""

    def hook(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        for key, value in pairs:
            if key in obj:
                raise SchemaError(document, f"duplicate key '{key}'")
            obj[key] = value
        return obj

    return hook


def decode_json(text: str, document: str) -> Any:
    """Parse JSON text, failing on invalid syntax or duplicate object keys.

    Raises:
        SchemaError: If the text is not JSON or an object repeats a key
    """
    try:
        return json.loads(text, object_pairs_hook=_unique_keys(document))
    except json.JSONDecodeError as e:
        raise SchemaError(document, f"invalid JSON: {e}") from e


def load_document(text: str, document: str) -> dict[str, Any]:
    """Parse document text and check it is an object with a ``data`` array.

    Args:
        text: Decompressed document text
        document: Document name used in error messages

    Returns:
        The top-level JSON object

    Raises:
        SchemaError: If the text is not JSON or lacks a ``data`` array
    """
    root = expect_object(decode_json(text, document), document, "document root")
    if "data" not in root:
        raise SchemaError(document, "missing 'data' array")
    expect_list(root["data"], document, "data")
    return root
