"""Settings read from the simulator YAML configuration file."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class SettingsFileError(Exception):
    """Exception raised when the settings file cannot be read or parsed."""


class SimulatorSettings(BaseModel):
    """Settings loaded from the simulator YAML configuration file.

    Every key is optional and falls back to its zero value. Settings are
    immutable per runtime.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    port: int = Field(default=0, alias="Port")
    etcd_url: str = Field(default="", alias="EtcdURL")
    cors_allowed_origin_list: list[str] = Field(
        default_factory=list, alias="CorsAllowedOriginList"
    )
    # Read but not consumed by config resolution
    kube_config: str = Field(default="", alias="KubeConfig")
    kube_api_host: str = Field(default="", alias="KubeApiHost")
    kube_api_port: int = Field(default=0, alias="KubeApiPort")
    kube_scheduler_config_path: str = Field(default="", alias="KubeSchedulerConfigPath")
    external_import_enabled: bool = Field(default=False, alias="ExternalImportEnabled")
    external_scheduler_enabled: bool = Field(
        default=False, alias="ExternalSchedulerEnabled"
    )


def read_settings(path: str | Path) -> SimulatorSettings:
    """Read settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        SimulatorSettings: Parsed settings

    Raises:
        SettingsFileError: If the file cannot be read or does not match the schema
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except OSError as e:
        raise SettingsFileError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsFileError(f"Invalid YAML in settings file {path}: {e}") from e

    if content is None:
        return SimulatorSettings()
    if not isinstance(content, dict):
        raise SettingsFileError(
            f"Settings file {path} must contain a mapping, got {type(content).__name__}"
        )

    # A key with no value keeps the field's zero value
    content = {key: value for key, value in content.items() if value is not None}

    try:
        return SimulatorSettings.model_validate(content)
    except ValidationError as e:
        raise SettingsFileError(f"Invalid settings in {path}: {e}") from e


def load_settings(path: str | Path) -> SimulatorSettings:
    """Load settings, falling back to zero values when the file is unusable.

    The settings file is optional: a missing or malformed file is logged and
    the default settings are returned instead.
    """
    try:
        return read_settings(path)
    except SettingsFileError as e:
        if isinstance(e.__cause__, FileNotFoundError):
            logger.info("No settings file at %s, using defaults", path)
        else:
            logger.warning("Ignoring settings file: %s", e)
        return SimulatorSettings()
