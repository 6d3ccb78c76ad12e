"""oascompat -- let OpenAPI 3.0-minded code consume OpenAPI 3.1 documents.

The package ingests raw JSON or YAML spec text, checks it carries an ``info``
object, projects the sections a converter needs, and smooths over the JSON
Schema changes 3.1 introduced (union ``type``, plural ``examples``).

Typical usage::

    from oascompat import fix_examples_by_version, get_required_data, parse_spec

    outcome = parse_spec(text)
    if outcome.ok:
        data = get_required_data(outcome.document)

Modules:
    app: Typer CLI entry point (``oascompat check|summary|schemas|content``).
    models: Pydantic models shared across the package.
    config: XDG-aware settings with environment overrides.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"

from oascompat.parser import get_required_data, parse_spec  # noqa: E402
from oascompat.schema import (  # noqa: E402
    compare_types,
    fix_examples_by_version,
    is_binary_content_type,
)

__all__ = [
    "__version__",
    "compare_types",
    "fix_examples_by_version",
    "get_required_data",
    "is_binary_content_type",
    "parse_spec",
]
