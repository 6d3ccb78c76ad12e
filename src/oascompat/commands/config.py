"""Config commands -- view and modify stored settings.

Provides the ``oascompat config`` sub-command group for reading, updating,
and resetting the settings file (:class:`~oascompat.models.Settings`) kept in
the oascompat config directory.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError

from oascompat.exceptions import OasCompatError
from oascompat.exit_codes import EXIT_INVALID_USAGE
from oascompat.output import error, format_response, info, success

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the effective settings, environment overrides included.

    Example::

        oascompat config show
        oascompat --json config show
    """
    from oascompat.config import get_config_dir, load_settings

    try:
        settings = load_settings()
    except OasCompatError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    info(f"Config directory: {get_config_dir()}")
    format_response(settings.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Setting name, e.g. 'max_schema_depth'."),
    value: str = typer.Argument(help="Value to store."),
) -> None:
    """Store a setting in the config file.

    The value is coerced to the type of the current field and validated
    against :class:`~oascompat.models.Settings` before saving. Environment
    overrides are neither applied nor written back.

    Raises:
        typer.Exit: With code 2 if the key is unknown, the value cannot be
            coerced, or validation fails.

    Example::

        oascompat config set max_schema_depth 64
        oascompat config set output_format plain
    """
    from oascompat.config import load_settings, save_settings
    from oascompat.models import Settings

    try:
        data = load_settings(apply_env=False).model_dump(mode="json")
    except OasCompatError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    if key not in data:
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    coerced: object = value
    if isinstance(data[key], int):
        try:
            coerced = int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=EXIT_INVALID_USAGE) from None
    data[key] = coerced

    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        error(f"Invalid value for {key}: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=EXIT_INVALID_USAGE) from None

    save_settings(settings)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Overwrite the config file with default settings.

    Example::

        oascompat config reset --yes
    """
    from oascompat.config import save_settings
    from oascompat.models import Settings

    if not yes and not typer.confirm("Reset all settings to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_settings(Settings())
    success("Settings reset to defaults.")
