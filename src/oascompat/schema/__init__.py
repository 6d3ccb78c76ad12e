"""Stateless JSON Schema helpers for consuming OpenAPI 3.1 with 3.0 assumptions.

Sub-modules:

* :mod:`~oascompat.schema.types` -- union ``type`` comparison.
* :mod:`~oascompat.schema.examples` -- ``examples`` to ``example`` rewriting.
* :mod:`~oascompat.schema.content` -- binary media-type classification.
"""

from oascompat.schema.content import is_binary_content_type
from oascompat.schema.examples import fix_examples_by_version
from oascompat.schema.types import compare_types, is_nullable, primary_type, to_type_spec

__all__ = [
    "compare_types",
    "fix_examples_by_version",
    "is_binary_content_type",
    "is_nullable",
    "primary_type",
    "to_type_spec",
]
