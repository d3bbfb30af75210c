"""Analyzer configuration.

The analyzer runs with built-in defaults. An optional TOML file at
~/.config/muse-outdated/config.toml can override them:

    cargo_path = "/root/.cargo/bin/cargo"
    timeout_seconds = 300
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from muse_outdated.checker.outdated import DEFAULT_CARGO, DEFAULT_OUTDATED_ARGS
from muse_outdated.core.paths import get_config_path

logger = logging.getLogger(__name__)


class AnalyzerConfig(BaseModel):
    """Configuration for the cargo-outdated analyzer.

    Attributes:
        cargo_path: cargo executable, looked up in PATH unless absolute.
        outdated_args: Arguments passed to cargo.
        manifest_name: Manifest file scanned for declarations.
        lockfile_name: Lockfile that makes the analyzer applicable.
        timeout_seconds: Maximum time for cargo-outdated (None = wait forever).
    """

    model_config = ConfigDict(extra="forbid")

    cargo_path: Annotated[
        str,
        Field(min_length=1, description="cargo executable"),
    ] = DEFAULT_CARGO
    outdated_args: Annotated[
        list[str],
        Field(description="Arguments passed to cargo"),
    ] = list(DEFAULT_OUTDATED_ARGS)
    manifest_name: Annotated[
        str,
        Field(min_length=1, description="Manifest file name"),
    ] = "Cargo.toml"
    lockfile_name: Annotated[
        str,
        Field(min_length=1, description="Lockfile name"),
    ] = "Cargo.lock"
    timeout_seconds: Annotated[
        int | None,
        Field(ge=1, description="Timeout in seconds (None = no timeout)"),
    ] = None


class ConfigError(Exception):
    """Base exception for analyzer configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> AnalyzerConfig:
    """Load analyzer configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AnalyzerConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    try:
        exists = config_path.exists()
    except OSError as e:
        raise ConfigError(f"Failed to access config {config_path}: {e}") from e

    if not exists:
        logger.debug("No config file at %s, using defaults", config_path)
        return AnalyzerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        config = AnalyzerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
