"""Decode raw OpenAPI text into a document mapping.

Decoding is expressed as an ordered tuple of strategies, each wrapping one
library. :func:`decode_document` tries them in sequence and returns the first
result that is a mapping. JSON goes first: valid JSON is also valid YAML, but
JSON parsing is stricter, and a malformed JSON document that YAML happens to
read as a bare string or list must not be accepted as a spec.

Adding a format means appending another strategy to :data:`DEFAULT_DECODERS`
(or passing a custom tuple to :func:`decode_document`).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Protocol

import yaml

from oascompat.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)


class DecodeFailure(Exception):
    """A single strategy could not produce a value from the text."""


class Decoder(Protocol):
    """A named decoding strategy."""

    name: str

    def decode(self, text: str) -> Any:
        """Return the decoded value or raise :class:`DecodeFailure`."""
        ...


def _parse_int(literal: str) -> int:
    """Parse a JSON integer literal, including ones past ``int()``'s digit limit."""
    try:
        return int(literal)
    except ValueError:
        return int(Decimal(literal))


class JsonDecoder:
    name = "json"

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text, parse_int=_parse_int)
        except (ValueError, TypeError, RecursionError) as exc:
            raise DecodeFailure(str(exc)) from exc


class _SpecLoader(yaml.SafeLoader):
    """Safe loader whose integers are not capped by ``int()``'s digit limit."""

    def construct_yaml_int(self, node: yaml.Node) -> int:
        try:
            return super().construct_yaml_int(node)
        except ValueError:
            value = self.construct_scalar(node).replace("_", "")
            return int(Decimal(value))


_SpecLoader.add_constructor("tag:yaml.org,2002:int", _SpecLoader.construct_yaml_int)


class YamlDecoder:
    name = "yaml"

    def decode(self, text: str) -> Any:
        try:
            return yaml.load(text, Loader=_SpecLoader)
        except (yaml.YAMLError, ValueError, ArithmeticError, RecursionError) as exc:
            raise DecodeFailure(str(exc)) from exc


DEFAULT_DECODERS: tuple[Decoder, ...] = (JsonDecoder(), YamlDecoder())


def decode_document(
    text: str, decoders: Sequence[Decoder] = DEFAULT_DECODERS
) -> dict[str, Any]:
    """Decode *text* with the first strategy that yields a mapping.

    Args:
        text: Raw JSON or YAML text.
        decoders: Strategies to try, in order.

    Returns:
        The decoded top-level mapping.

    Raises:
        InvalidFormatError: If every strategy failed or produced a
            non-mapping value (scalar, list, or an empty YAML document).
    """
    failures: list[str] = []
    for decoder in decoders:
        try:
            result = decoder.decode(text)
        except DecodeFailure as exc:
            logger.debug("%s decoder failed: %s", decoder.name, exc)
            failures.append(f"{decoder.name}: {exc}")
            continue

        if isinstance(result, dict):
            return result

        got = type(result).__name__ if result is not None else "empty document"
        logger.debug("%s decoder produced %s, not a mapping", decoder.name, got)
        failures.append(f"{decoder.name}: expected a mapping (got {got})")

    raise InvalidFormatError(
        "Failed to decode spec as " + " or ".join(d.name.upper() for d in decoders)
        + "".join(f"\n  {f}" for f in failures)
    )
