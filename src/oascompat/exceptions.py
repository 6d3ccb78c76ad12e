"""Exception hierarchy for oascompat.

All exceptions inherit from :class:`OasCompatError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`oascompat.exit_codes`.
The CLI entry point in :func:`oascompat.app.main` catches ``OasCompatError``
and exits with the appropriate code.

The core parsing entry point :func:`~oascompat.parser.spec_parser.parse_spec`
never lets :class:`InvalidFormatError` or :class:`MissingInfoObjectError`
escape; it translates them into a failed
:class:`~oascompat.models.ParseOutcome` instead.

Subclass hierarchy::

    OasCompatError              (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- ConnectionError_        (exit 6)
    +-- SpecParseError          (exit 7)
    |   +-- InvalidFormatError
    |   +-- MissingInfoObjectError
    |   +-- SourceLoadError
    +-- SchemaDepthError        (exit 8)
    +-- ConfigError             (exit 1)
"""

from oascompat.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SCHEMA_DEPTH,
    EXIT_SPEC_PARSE_ERROR,
)


class OasCompatError(Exception):
    """Base exception for all oascompat errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`oascompat.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(OasCompatError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class ConnectionError_(OasCompatError):
    """Raised on network-level failures while fetching a remote spec.

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class SpecParseError(OasCompatError):
    """Raised when an OpenAPI spec cannot be loaded, decoded, or validated."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class InvalidFormatError(SpecParseError):
    """Raised when no decoder strategy produced a document-shaped mapping."""


class MissingInfoObjectError(SpecParseError):
    """Raised when a decoded document has no ``info`` object."""


class SourceLoadError(SpecParseError):
    """Raised when raw spec text cannot be read from a file, URL, or stdin."""


class SchemaDepthError(OasCompatError):
    """Raised when a schema walk exceeds the configured depth limit."""

    exit_code = EXIT_SCHEMA_DEPTH


class ConfigError(OasCompatError):
    """Raised for configuration problems (invalid JSON, bad values)."""

    exit_code = EXIT_GENERIC_FAILURE
