"""Typer application and CLI entry point for oascompat.

The CLI is a thin shell over the library: every command loads raw text with
:func:`~oascompat.parser.loader.load_text`, runs it through
:func:`~oascompat.parser.spec_parser.parse_spec`, and renders what the schema
helpers report.

Commands::

    oascompat check SOURCE            # parse and report version/title
    oascompat summary SOURCE          # the four required sections
    oascompat schemas SOURCE [-n X]   # components.schemas with examples fixed
    oascompat content SOURCE          # media types and binary classification
    oascompat config show|set|reset   # stored settings

:func:`main` is the console-script entry point declared in ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from oascompat import __version__
from oascompat.commands.config import config_app
from oascompat.exceptions import InvalidUsageError, OasCompatError, SpecParseError
from oascompat.exit_codes import EXIT_SPEC_PARSE_ERROR
from oascompat.models import RequiredData, Settings
from oascompat.output import (
    OutputFormat,
    OutputManager,
    debug,
    error,
    format_response,
    info,
    print_table,
    set_output,
    warning,
)
from oascompat.parser import (
    get_required_data,
    is_openapi_31,
    load_text,
    parse_spec,
    validate_openapi_version,
)
from oascompat.schema import (
    fix_examples_by_version,
    is_binary_content_type,
    is_nullable,
    primary_type,
)

app = typer.Typer(
    name="oascompat",
    help="Normalize OpenAPI 3.1 documents for 3.0-minded tooling.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(config_app, name="config", help="View and change stored settings.")

_HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"oascompat {__version__}")
        raise typer.Exit()


def _enable_debug_logging() -> None:
    logger = logging.getLogger("oascompat")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Root callback executed before every sub-command.

    Loads settings, installs the global :class:`~oascompat.output.OutputManager`
    and stores the settings in ``ctx.obj`` for sub-commands.
    """
    from oascompat.config import load_settings

    try:
        settings = load_settings()
    except OasCompatError as exc:
        set_output(OutputManager(no_color=no_color))
        if ctx.invoked_subcommand != "config":
            error(str(exc))
            raise typer.Exit(code=exc.exit_code) from None
        # Let "config reset" repair a broken settings file.
        warning(str(exc))
        settings = Settings()

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        try:
            fmt = OutputFormat(settings.output_format)
        except ValueError:
            fmt = OutputFormat.AUTO

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    if verbose:
        _enable_debug_logging()

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


def _settings(ctx: typer.Context) -> Settings:
    return (ctx.obj or {}).get("settings") or Settings()


def _load_document(source: str) -> dict[str, Any]:
    """Load and parse *source*, exiting with the error's code on failure."""
    try:
        text = load_text(source)
    except OasCompatError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    outcome = parse_spec(text)
    if not outcome.ok:
        error(outcome.reason.value)
        raise typer.Exit(code=EXIT_SPEC_PARSE_ERROR)

    debug(f"Parsed spec from {source}")
    return outcome.document


def _load_required_data(source: str) -> RequiredData:
    """Load *source* and project it to its required sections, exiting on failure."""
    document = _load_document(source)
    try:
        return get_required_data(document)
    except OasCompatError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def _count(section: Any) -> str:
    return str(len(section)) if isinstance(section, (dict, list)) else "-"


@app.command("check")
def check_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
) -> None:
    """Parse a spec and report its OpenAPI version and title.

    Exits with code 7 and the canonical reason on stderr when the document is
    not JSON/YAML or has no Info Object.
    """
    document = _load_document(source)

    try:
        version = validate_openapi_version(document)
    except SpecParseError as exc:
        warning(str(exc))
        version = None
    else:
        if not is_openapi_31(document):
            warning(f"Spec declares OpenAPI {version}, not 3.1.x")

    title = document["info"].get("title") if isinstance(document["info"], dict) else None
    format_response({"ok": True, "openapi": version, "title": title})


@app.command("summary")
def summary_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
) -> None:
    """Show the required sections of a spec and how many entries each holds."""
    data = _load_required_data(source)

    rows = [
        ["info", "mapping", _count(data.info)],
        ["paths", "mapping", _count(data.paths)],
        [
            "webhooks",
            "mapping" if isinstance(data.webhooks, dict) else "list",
            _count(data.webhooks),
        ],
        ["components", "mapping", _count(data.components)],
    ]
    print_table(["Section", "Shape", "Entries"], rows, title="Required data")


@app.command("schemas")
def schemas_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
    name: Optional[str] = typer.Option(
        None, "--name", "-n", help="Only output this component schema."
    ),
) -> None:
    """Print ``components.schemas`` with 3.1 ``examples`` copied to ``example``."""
    settings = _settings(ctx)
    data = _load_required_data(source)
    schemas = data.components.get("schemas") or {}

    if name is not None:
        if name not in schemas:
            exc = InvalidUsageError(f"Schema '{name}' not found in components.schemas")
            error(str(exc))
            raise typer.Exit(code=exc.exit_code)
        schemas = {name: schemas[name]}

    if not schemas:
        info("No schemas defined in this spec.")
        return

    try:
        fixed = {
            key: fix_examples_by_version(schema, max_depth=settings.max_schema_depth)
            if isinstance(schema, dict)
            else schema
            for key, schema in schemas.items()
        }
    except OasCompatError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    format_response(fixed)


def _iter_content_maps(paths: dict[str, Any]):  # noqa: ANN202
    """Yield ``(location, content_map)`` for every body in *paths*."""
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method in _HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            label = f"{method.upper()} {path}"

            body = operation.get("requestBody")
            if isinstance(body, dict) and isinstance(body.get("content"), dict):
                yield f"{label} request", body["content"]

            for status, response in (operation.get("responses") or {}).items():
                if isinstance(response, dict) and isinstance(response.get("content"), dict):
                    yield f"{label} {status}", response["content"]


def _describe_type(entry: Any) -> str:
    schema = entry.get("schema") if isinstance(entry, dict) else None
    if not isinstance(schema, dict) or "type" not in schema:
        return "-"
    try:
        label = primary_type(schema["type"])
        nullable = is_nullable(schema["type"])
    except TypeError:
        return "invalid"
    return f"{label}?" if nullable else label


@app.command("content")
def content_command(
    source: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
) -> None:
    """List every request/response media type and whether it is binary."""
    data = _load_required_data(source)

    rows: list[list[str]] = []
    for location, content in _iter_content_maps(data.paths):
        for media_type, entry in content.items():
            binary = isinstance(entry, dict) and is_binary_content_type(media_type, content)
            rows.append([location, media_type, _describe_type(entry), "yes" if binary else ""])

    if not rows:
        info("No request or response bodies defined in this spec.")
        return

    print_table(["Location", "Media type", "Type", "Binary"], rows, title="Content")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """Console-script entry point."""
    _setup_signal_handlers()
    try:
        app()
    except OasCompatError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
