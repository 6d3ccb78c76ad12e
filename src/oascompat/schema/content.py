"""Classify entries of an OpenAPI ``content`` map."""

from __future__ import annotations

from typing import Any


def is_binary_content_type(media_type: str, content: dict[str, Any]) -> bool:
    """Return True if *media_type* in *content* carries an opaque binary payload.

    A media-type entry without a ``schema`` key is treated as binary data,
    which is how ``application/octet-stream`` bodies are usually declared.
    Any entry with a ``schema`` is not binary, whatever its ``type``, and a
    media type missing from the map is not binary either. The media-type
    string itself is not inspected.

    Example::

        is_binary_content_type(
            "application/octet-stream", {"application/octet-stream": {}}
        )  # True
    """
    entry = content.get(media_type)
    if entry is None:
        return False
    return "schema" not in entry
