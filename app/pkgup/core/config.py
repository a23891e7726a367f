"""pkgup configuration and settings.

Configuration is stored in ~/.config/pkgup/config.toml:

    run_mode = "prompt"   # prompt | update | full
    logging = "on"        # on | off
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pkgup.core.paths import get_config_path
from pkgup.models.environment import RunMode

logger = logging.getLogger(__name__)

LoggingToggle = Literal["on", "off"]


class PkgupError(Exception):
    """Base exception for pkgup errors."""


class ConfigurationError(PkgupError):
    """Raised when pkgup cannot run with the current system or configuration.

    Covers a missing supported package manager and invalid configuration
    values. Always fatal.
    """


class PkgupConfig(BaseModel):
    """User configuration for pkgup.

    Attributes:
        run_mode: What to do on startup (prompt, update or full).
        logging: Whether to append changes to the update log ("on" or "off").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    run_mode: Annotated[
        RunMode,
        Field(description="Startup behaviour: prompt, update or full"),
    ] = RunMode.PROMPT
    logging: Annotated[
        LoggingToggle,
        Field(description="Append a record of each update to the update log"),
    ] = "on"

    @property
    def logging_enabled(self) -> bool:
        """Check if update logging is switched on."""
        return self.logging == "on"


def load_config(path: Path | None = None) -> PkgupConfig:
    """Load configuration from a TOML file.

    A missing file yields the defaults.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PkgupConfig object.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or its
            content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return PkgupConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config {config_path}: {e}") from e

    try:
        return PkgupConfig.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid config {config_path}: {errors}") from e


def save_config(config: PkgupConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PkgupConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        OSError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"run_mode": config.run_mode.value, "logging": config.logging}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise

    return config_path


def ensure_config(path: Path | None = None) -> PkgupConfig:
    """Load the configuration, writing the defaults if no file exists yet.

    Failing to write the default file is not fatal; the defaults are used.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PkgupConfig object.

    Raises:
        ConfigurationError: If an existing file is invalid.
    """
    config_path = path or get_config_path()
    config = load_config(config_path)

    if not config_path.exists():
        try:
            save_config(config, config_path)
            logger.debug("Wrote default config to %s", config_path)
        except OSError as e:
            logger.warning("Could not write default config to %s: %s", config_path, e)

    return config
