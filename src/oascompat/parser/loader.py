"""Read raw OpenAPI text from a URL, local file, or stdin.

This module handles all I/O for fetching spec documents. It does
not decode anything: the text it returns goes straight to
:func:`~oascompat.parser.spec_parser.parse_spec`, which is the only place
format detection and validation happen.

The single public function is :func:`load_text`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import httpx

from oascompat.exceptions import ConnectionError_, SourceLoadError

logger = logging.getLogger(__name__)


def load_text(source: str) -> str:
    """Load raw spec text from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The document text. Empty files are returned as-is so that
        :func:`~oascompat.parser.spec_parser.parse_spec` reports them.

    Raises:
        SourceLoadError: If the source is missing or unreadable, stdin is
            empty, or the server answered with an HTTP error status.
        ConnectionError_: If a remote source could not be reached.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> str:
    """Read all of stdin."""
    logger.debug("Reading spec from stdin")
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SourceLoadError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SourceLoadError("No input received from stdin")
    return content


def _load_from_url(url: str) -> str:
    """Fetch spec text over HTTP(S).

    Args:
        url: The HTTP(S) URL to fetch.

    Returns:
        The response body as text.
    """
    logger.debug("Fetching spec from %s", url)
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SourceLoadError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise ConnectionError_(f"Failed to fetch spec from {url}: {exc}") from exc

    return response.text


def _load_from_file(path: str) -> str:
    """Read spec text from a local UTF-8 file.

    Args:
        path: Path to the local file.

    Returns:
        The file contents.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceLoadError(f"Spec file not found: {path}")

    logger.debug("Reading spec from %s", file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(f"Failed to read spec file {path}: {exc}") from exc
