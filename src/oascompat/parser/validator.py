"""Minimal structural checks on a decoded OpenAPI document.

Only the presence of the ``info`` object is enforced by the ingestion gate
(:func:`validate_spec`). Version inspection (:func:`validate_openapi_version`,
:func:`is_openapi_31`) is offered separately for callers that want to warn
about or reject documents outside the 3.x line.
"""

from __future__ import annotations

from typing import Any

from oascompat.exceptions import MissingInfoObjectError, SpecParseError


def validate_spec(document: Any) -> None:
    """Check that *document* is a mapping with an ``info`` key.

    Raises:
        MissingInfoObjectError: If the check fails.
    """
    if not isinstance(document, dict) or "info" not in document:
        raise MissingInfoObjectError("Spec has no 'info' object")


def validate_openapi_version(spec: dict[str, Any]) -> str:
    """Validate and return the OpenAPI version string.

    Supports OpenAPI 3.x. Raises SpecParseError for Swagger 2.x,
    missing version fields, or other versions.

    Args:
        spec: The parsed spec dictionary.

    Returns:
        The OpenAPI version string (e.g., ``'3.0.3'``, ``'3.1.0'``).

    Raises:
        SpecParseError: If the version is missing, unsupported, or indicates
            Swagger 2.x.
    """
    if "swagger" in spec:
        raise SpecParseError(
            f"Swagger {spec['swagger']} is not supported. "
            "Only OpenAPI 3.x documents are handled."
        )

    openapi_version = spec.get("openapi")
    if openapi_version is None:
        raise SpecParseError(
            "Missing 'openapi' field. Is this an OpenAPI 3.x document?"
        )

    version_str = str(openapi_version)
    if version_str.startswith("3."):
        return version_str

    raise SpecParseError(
        f"Unsupported OpenAPI version: {version_str}. "
        "Only OpenAPI 3.x documents are handled."
    )


def is_openapi_31(spec: dict[str, Any]) -> bool:
    """Return True when *spec* declares an OpenAPI 3.1.x version."""
    return str(spec.get("openapi", "")).startswith("3.1")
