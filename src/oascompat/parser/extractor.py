"""Project a parsed OpenAPI document down to what a converter needs.

The single public entry point is :func:`get_required_data`. It reads the
``info``, ``paths``, ``webhooks`` and ``components`` sections of a document
that has already passed :func:`~oascompat.parser.spec_parser.parse_spec` and
fills in empty defaults for the optional ones.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from oascompat.exceptions import SpecParseError
from oascompat.models import RequiredData


def get_required_data(spec: dict[str, Any]) -> RequiredData:
    """Extract the four top-level sections a converter consumes.

    Missing optional sections are treated as absent, never as an error:
    ``paths`` and ``components`` default to ``{}``, and ``webhooks`` defaults
    to ``[]``. A ``webhooks`` mapping that is present is passed through as-is.
    The input document is not modified.

    Args:
        spec: A document accepted by
            :func:`~oascompat.parser.spec_parser.parse_spec`.

    Returns:
        A fresh :class:`~oascompat.models.RequiredData` instance.

    Raises:
        SpecParseError: If a section is present but has the wrong shape,
            e.g. an ``info`` that is null or a scalar.

    Example::

        outcome = parse_spec(text)
        data = get_required_data(outcome.document)
        sorted(data.model_dump())  # ['components', 'info', 'paths', 'webhooks']
    """
    assert "info" in spec, "get_required_data() needs a document with an 'info' object"

    webhooks = spec.get("webhooks")
    if webhooks is None:
        webhooks = []

    try:
        return RequiredData(
            info=spec["info"],
            paths=spec.get("paths") or {},
            webhooks=webhooks,
            components=spec.get("components") or {},
        )
    except ValidationError as exc:
        raise SpecParseError(_describe_shape_errors(exc)) from exc


def _describe_shape_errors(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        section = str(err["loc"][0]) if err["loc"] else "document"
        problems.append(f"'{section}' {err['msg'].lower()}")
    return "Malformed spec: " + "; ".join(dict.fromkeys(problems))
