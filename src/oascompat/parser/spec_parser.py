"""Single ingestion gate for raw OpenAPI text.

:func:`parse_spec` composes :func:`~oascompat.parser.decoders.decode_document`
and :func:`~oascompat.parser.validator.validate_spec` and reports the result
as a :class:`~oascompat.models.ParseOutcome` value. It is the only place the
two internal parse errors are translated into the canonical reason sentences,
and it never raises for string input.
"""

from __future__ import annotations

import logging

from oascompat.exceptions import InvalidFormatError, MissingInfoObjectError
from oascompat.models import ErrorReason, ParseOutcome
from oascompat.parser.decoders import decode_document
from oascompat.parser.validator import validate_spec

logger = logging.getLogger(__name__)


def parse_spec(text: str) -> ParseOutcome:
    """Decode and minimally validate an OpenAPI document.

    Args:
        text: Raw JSON or YAML text of an OpenAPI document.

    Returns:
        ``ParseOutcome(ok=True, document=...)`` carrying the full decoded
        tree, or ``ParseOutcome(ok=False, reason=...)`` with
        :attr:`ErrorReason.INVALID_FORMAT` or :attr:`ErrorReason.MISSING_INFO`.

    Example::

        outcome = parse_spec('{"openapi": "3.1.0", "info": {}}')
        assert outcome.ok
    """
    try:
        document = decode_document(text)
    except InvalidFormatError as exc:
        logger.debug("Rejected spec: %s", exc)
        return ParseOutcome.failure(ErrorReason.INVALID_FORMAT)

    try:
        validate_spec(document)
    except MissingInfoObjectError as exc:
        logger.debug("Rejected spec: %s", exc)
        return ParseOutcome.failure(ErrorReason.MISSING_INFO)

    return ParseOutcome.success(document)
