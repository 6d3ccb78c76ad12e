"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~oascompat.exceptions.OasCompatError` subclass.
CI scripts can inspect the exit code to tell a malformed spec apart from a
network failure without parsing stderr.

Example::

    $ oascompat check broken.yaml
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the document could not be parsed
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred while fetching a remote spec."""

EXIT_SPEC_PARSE_ERROR = 7
"""The OpenAPI specification could not be loaded, decoded, or validated."""

EXIT_SCHEMA_DEPTH = 8
"""A schema nested deeper than the configured traversal limit."""
