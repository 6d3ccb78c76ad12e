"""OpenAPI spec ingestion -- decode, validate, and project raw documents.

This sub-package is the front half of the oascompat pipeline: turning raw
JSON or YAML text into a validated document and the
:class:`~oascompat.models.RequiredData` a converter consumes.

Typical usage::

    from oascompat.parser import get_required_data, load_text, parse_spec

    outcome = parse_spec(load_text("openapi.yaml"))
    if outcome.ok:
        data = get_required_data(outcome.document)

Sub-modules:

* :mod:`~oascompat.parser.loader` -- I/O layer (URL, file, stdin).
* :mod:`~oascompat.parser.decoders` -- ordered JSON/YAML decoder strategies.
* :mod:`~oascompat.parser.validator` -- ``info`` presence and version checks.
* :mod:`~oascompat.parser.spec_parser` -- the :func:`parse_spec` gate.
* :mod:`~oascompat.parser.extractor` -- the :func:`get_required_data`
  projection.
"""

from oascompat.parser.extractor import get_required_data
from oascompat.parser.loader import load_text
from oascompat.parser.spec_parser import parse_spec
from oascompat.parser.validator import is_openapi_31, validate_openapi_version

__all__ = [
    "get_required_data",
    "is_openapi_31",
    "load_text",
    "parse_spec",
    "validate_openapi_version",
]
