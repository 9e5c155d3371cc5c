"""
Configuration loader — reads a YAML defaults file.

The defaults file lets a user change what ``cenv NAME`` does without
flags (e.g. always C with gcc). Explicit command-line values always win;
main.py applies that precedence.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from cenv.core.models.options import BuildTool, Language

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CENV_CONFIG"


class ConfigError(Exception):
    """Raised when the defaults file is unreadable or invalid."""


class Defaults(BaseModel):
    """Values from the defaults file. ``None`` means "not set"."""

    model_config = ConfigDict(extra="forbid")

    build_type: BuildTool | None = None
    language: Language | None = None
    git: bool | None = None
    readme: bool | None = None
    output_dir: Path | None = None


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Pick the defaults file: explicit path, else ``$CENV_CONFIG``, else None."""
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return None


def load_defaults(path: Path | None = None) -> Defaults:
    """Load and validate the defaults file.

    Args:
        path: Explicit path to the file. If None, ``$CENV_CONFIG`` is used;
            with neither set, empty defaults are returned.

    Returns:
        Validated Defaults model.

    Raises:
        ConfigError: If a named file is missing or invalid.
    """
    path = find_config_file(path)
    if path is None:
        return Defaults()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading defaults from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Defaults()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        defaults = Defaults.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    if defaults.output_dir is not None:
        defaults = defaults.model_copy(update={"output_dir": defaults.output_dir.expanduser()})

    return defaults
