"""Configuration management with XDG paths, atomic writes, and env overrides.

This module handles the small amount of persistent configuration oascompat
keeps:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.oascompat/`` on macOS and Windows. See :func:`get_config_dir`.
* **Settings** -- A single :class:`~oascompat.models.Settings` JSON file
  storing defaults (schema depth limit, output format). Managed via
  :func:`load_settings` and :func:`save_settings`.
* **Environment overrides** -- ``OASCOMPAT_MAX_SCHEMA_DEPTH`` and
  ``OASCOMPAT_OUTPUT`` take precedence over the file.

File writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`).
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from oascompat.exceptions import ConfigError
from oascompat.models import Settings

_APP_NAME = "oascompat"
_CONFIG_FILENAME = "config.json"

_ENV_MAX_DEPTH = "OASCOMPAT_MAX_SCHEMA_DEPTH"
_ENV_OUTPUT = "OASCOMPAT_OUTPUT"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/oascompat/`` (default ``~/.config/oascompat/``).
    On macOS/Windows: ``~/.oascompat/``.

    Returns:
        Absolute path to the configuration directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".config"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is cleaned up and the error re-raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Settings ---


def _settings_path() -> Path:
    """Path to the settings file."""
    return get_config_dir() / _CONFIG_FILENAME


def _env_overrides() -> dict[str, Any]:
    """Collect settings overrides from the environment."""
    overrides: dict[str, Any] = {}
    depth = os.environ.get(_ENV_MAX_DEPTH)
    if depth:
        try:
            overrides["max_schema_depth"] = int(depth)
        except ValueError as exc:
            raise ConfigError(
                f"{_ENV_MAX_DEPTH} must be an integer (got {depth!r})"
            ) from exc
    output = os.environ.get(_ENV_OUTPUT)
    if output:
        overrides["output_format"] = output
    return overrides


def load_settings(apply_env: bool = True) -> Settings:
    """Load settings from the config directory and apply env overrides.

    Pass ``apply_env=False`` to read only what is stored on disk, e.g. before
    writing the file back with :func:`save_settings`.

    Precedence (high to low):
        1. Environment variables (``OASCOMPAT_MAX_SCHEMA_DEPTH``,
           ``OASCOMPAT_OUTPUT``)
        2. ``config.json`` in :func:`get_config_dir`
        3. Model defaults

    Returns:
        The effective :class:`~oascompat.models.Settings`.

    Raises:
        ConfigError: If the file contains invalid JSON, or the merged values
            fail Pydantic validation.
    """
    path = _settings_path()
    data: dict[str, Any] = {}
    if path.is_file():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid settings file at {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file at {path} must contain a JSON object")

    if apply_env:
        data.update(_env_overrides())
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def save_settings(settings: Settings) -> None:
    """Persist settings atomically to disk.

    Args:
        settings: The settings to save.
    """
    data = settings.model_dump(mode="json")
    _atomic_write(_settings_path(), json.dumps(data, indent=2) + "\n")
