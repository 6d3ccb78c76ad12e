"""Compare JSON Schema ``type`` keywords across OpenAPI 3.0 and 3.1.

OpenAPI 3.1 adopts JSON Schema 2020-12, where ``type`` may be a list of names
(``["string", "null"]``) instead of a single name. Every helper here
normalizes the raw keyword once, via :func:`to_type_spec`, into a
:data:`~oascompat.models.TypeSpec` and works on that.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from oascompat.models import ScalarType, TypeSpec, UnionType

RawType = Union[str, Sequence[str]]


def to_type_spec(type_in_spec: Any) -> TypeSpec:
    """Normalize a raw ``type`` keyword into a tagged type spec.

    Args:
        type_in_spec: A type name or a sequence of type names.

    Returns:
        A :class:`~oascompat.models.ScalarType` for a string, otherwise a
        :class:`~oascompat.models.UnionType`.

    Raises:
        TypeError: If the value is neither a string nor a sequence of strings.
    """
    if isinstance(type_in_spec, str):
        return ScalarType(name=type_in_spec)

    if isinstance(type_in_spec, (list, tuple)) and all(
        isinstance(name, str) for name in type_in_spec
    ):
        order = tuple(dict.fromkeys(type_in_spec))
        return UnionType(names=frozenset(order), order=order)

    raise TypeError(
        "type must be a string or a list of strings "
        f"(got {type(type_in_spec).__name__})"
    )


def compare_types(type_in_spec: RawType, type_to_compare: str) -> bool:
    """Return True if *type_to_compare* is one of the names in *type_in_spec*.

    Comparison is exact string membership: no synonyms (``integer`` does not
    match ``number``), and order or duplicates in a union do not matter.

    Example::

        compare_types(["string", "null"], "string")  # True
        compare_types("integer", "string")           # False
    """
    return to_type_spec(type_in_spec).contains(type_to_compare)


def is_nullable(type_in_spec: RawType) -> bool:
    """Return True when the type admits ``null`` (3.1 spelling of ``nullable``)."""
    return compare_types(type_in_spec, "null")


def primary_type(type_in_spec: RawType | None, default: str = "string") -> str:
    """Collapse a 3.1 type into the single name a 3.0 consumer expects.

    Returns the first non-``null`` member in declaration order, or *default*
    when the type is missing or only ``null``.
    """
    if type_in_spec is None:
        return default
    non_null = [t for t in to_type_spec(type_in_spec).members() if t != "null"]
    return non_null[0] if non_null else default
