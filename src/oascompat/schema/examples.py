"""Reconcile OpenAPI 3.1 ``examples`` arrays with the 3.0 ``example`` field.

JSON Schema 2020-12 replaces the singular ``example`` keyword with an
``examples`` array. Code written against 3.0 only reads ``example``, so
:func:`fix_examples_by_version` copies the first array entry across.

The walk rebuilds the schema instead of editing it: the caller's dict is never
touched, and running the fix twice gives the same result as running it once.
It uses an explicit stack, so a large ``max_depth`` is bounded by memory and
not by the interpreter's recursion limit.
Only ``properties`` are descended into; ``items``, ``oneOf`` and other
composite keywords are carried over unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from oascompat.exceptions import SchemaDepthError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256


def fix_examples_by_version(
    schema: dict[str, Any], max_depth: Optional[int] = None
) -> dict[str, Any]:
    """Return a copy of *schema* where every node with ``examples`` has ``example``.

    For the root and every node reached through ``properties``, a non-empty
    ``examples`` list and a missing ``example`` key produce
    ``example = examples[0]``, appended after the node's existing keys. Nodes
    with no ``examples``, an empty one, or an explicit ``example`` are copied
    unchanged. Key order is preserved so serialized output stays stable.

    Args:
        schema: A JSON Schema object.
        max_depth: Maximum ``properties`` nesting to walk. Defaults to
            :data:`DEFAULT_MAX_DEPTH`.

    Returns:
        A new schema dict.

    Raises:
        SchemaDepthError: If nesting exceeds *max_depth*.

    Example::

        fixed = fix_examples_by_version(
            {"type": "string", "examples": ["OK"]}
        )
        fixed["example"]  # 'OK'
    """
    limit = DEFAULT_MAX_DEPTH if max_depth is None else max_depth

    root = _copy_node(schema)
    stack: list[tuple[dict[str, Any], int]] = [(root, 0)]
    while stack:
        fixed, depth = stack.pop()
        if depth > limit:
            logger.debug("Schema depth limit %d reached", limit)
            raise SchemaDepthError(f"Schema nesting exceeds the maximum depth of {limit}")

        properties = fixed.get("properties")
        if not isinstance(properties, dict):
            continue

        # Replacing the value in place keeps "properties" at its original key position.
        copied: dict[str, Any] = {}
        for name, prop in properties.items():
            if isinstance(prop, dict):
                child = _copy_node(prop)
                stack.append((child, depth + 1))
                copied[name] = child
            else:
                copied[name] = prop
        fixed["properties"] = copied

    return root


def _copy_node(node: dict[str, Any]) -> dict[str, Any]:
    """Shallow-copy *node*, appending ``example`` when only ``examples`` is set."""
    fixed = dict(node)
    examples = node.get("examples")
    if isinstance(examples, list) and examples and "example" not in node:
        fixed["example"] = examples[0]
    return fixed
