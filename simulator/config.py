"""Resolve the simulator configuration from the settings file.

Settings are read once at startup and turned into an immutable
``SimulatorConfig``. Any failure other than reading the settings file itself
aborts resolution with a ``ConfigError`` naming the step that failed.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import kubernetes.client
from pydantic import BaseModel, ConfigDict, model_validator

from simulator import constants
from simulator.cluster import CredentialError, load_ambient_cluster_credential
from simulator.scheduler import (
    DecodeError,
    KubeSchedulerConfiguration,
    decode_scheduler_config,
    default_scheduler_config,
)
from simulator.settings import SimulatorSettings, load_settings
from simulator.validation import InvalidURLError, validate_urls

logger = logging.getLogger(__name__)

CredentialLoader = Callable[[], kubernetes.client.Configuration]


class ConfigError(Exception):
    """Exception raised when a step of configuration resolution fails."""

    def __init__(self, step: str, cause: Optional[BaseException] = None):
        self.step = step
        self.cause = cause
        super().__init__(f"{step}: {cause}" if cause is not None else step)


class SimulatorConfig(BaseModel):
    """Configuration for the simulator.

    Resolved once at startup and immutable afterwards.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    port: int
    kube_api_server_url: str
    etcd_url: str
    cors_allowed_origin_list: list[str]
    # Whether resources are imported from an existing cluster
    external_import_enabled: bool
    # Set only when external_import_enabled is true
    external_kube_client_cfg: Optional[kubernetes.client.Configuration] = None
    initial_scheduler_cfg: KubeSchedulerConfiguration
    external_scheduler_enabled: bool

    @model_validator(mode="after")
    def check_external_client_cfg(self) -> "SimulatorConfig":
        has_cfg = self.external_kube_client_cfg is not None
        if has_cfg != self.external_import_enabled:
            raise ValueError(
                "external_kube_client_cfg must be set if and only if "
                "external_import_enabled is true"
            )
        return self

    def to_summary(self) -> dict:
        """Return the configuration as a JSON-serialisable mapping."""
        return {
            "port": self.port,
            "kube_api_server_url": self.kube_api_server_url,
            "etcd_url": self.etcd_url,
            "cors_allowed_origin_list": list(self.cors_allowed_origin_list),
            "external_import_enabled": self.external_import_enabled,
            "external_cluster_host": (
                self.external_kube_client_cfg.host
                if self.external_kube_client_cfg is not None
                else None
            ),
            "initial_scheduler_cfg": self.initial_scheduler_cfg.to_document(),
            "external_scheduler_enabled": self.external_scheduler_enabled,
        }


def get_kube_api_server_url(settings: SimulatorSettings) -> str:
    host = settings.kube_api_host or constants.DEFAULT_KUBE_API_HOST
    return f"{host}:{settings.kube_api_port}"


def get_cors_allowed_origin_list(settings: SimulatorSettings) -> list[str]:
    """Return the allowed CORS origins after checking each is a valid URL.

    The list applies to both kube-apiserver and the simulator server.
    """
    try:
        return validate_urls(settings.cors_allowed_origin_list)
    except InvalidURLError as e:
        raise ConfigError("validate origins in CorsAllowedOriginList", e) from e


def get_scheduler_cfg(settings: SimulatorSettings) -> KubeSchedulerConfiguration:
    """Return the initial scheduler configuration.

    Reads the file at KubeSchedulerConfigPath when set, otherwise uses the
    default scheduler configuration.
    """
    path = settings.kube_scheduler_config_path
    if not path:
        logger.info("No scheduler config file given, using the default configuration")
        return default_scheduler_config()

    logger.info("Loading scheduler configuration from %s", path)
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigError("read scheduler config file", e) from e

    try:
        return decode_scheduler_config(data)
    except DecodeError as e:
        raise ConfigError("decode scheduler config file", e) from e


def resolve_config(
    settings: SimulatorSettings,
    credential_loader: CredentialLoader = load_ambient_cluster_credential,
) -> SimulatorConfig:
    """Resolve the simulator configuration from loaded settings.

    Args:
        settings: Settings read from the settings file
        credential_loader: Called for a cluster client configuration when
            external import is enabled

    Returns:
        SimulatorConfig: Fully resolved configuration

    Raises:
        ConfigError: If any resolution step fails
    """
    # Ports are taken as-is, including 0 and negative values
    port = settings.port
    etcd_url = settings.etcd_url

    try:
        cors_allowed_origin_list = get_cors_allowed_origin_list(settings)
    except ConfigError as e:
        raise ConfigError("get frontend URL", e) from e

    kube_api_server_url = get_kube_api_server_url(settings)

    external_import_enabled = settings.external_import_enabled
    external_kube_client_cfg = None
    if external_import_enabled:
        try:
            external_kube_client_cfg = credential_loader()
        except CredentialError as e:
            raise ConfigError("get kube clientconfig", e) from e

    try:
        initial_scheduler_cfg = get_scheduler_cfg(settings)
    except ConfigError as e:
        raise ConfigError("get SchedulerCfg", e) from e

    config = SimulatorConfig(
        port=port,
        kube_api_server_url=kube_api_server_url,
        etcd_url=etcd_url,
        cors_allowed_origin_list=cors_allowed_origin_list,
        external_import_enabled=external_import_enabled,
        external_kube_client_cfg=external_kube_client_cfg,
        initial_scheduler_cfg=initial_scheduler_cfg,
        external_scheduler_enabled=settings.external_scheduler_enabled,
    )
    logger.debug("Resolved simulator configuration: %s", config.to_summary())
    return config


def new_config(
    config_path: str | Path = constants.CONFIG_FILE,
    credential_loader: CredentialLoader = load_ambient_cluster_credential,
) -> SimulatorConfig:
    """Load the settings file and resolve the simulator configuration.

    A missing or unreadable settings file is not an error: resolution then
    runs on default settings.

    Raises:
        ConfigError: If any resolution step fails
    """
    settings = load_settings(config_path)
    return resolve_config(settings, credential_loader=credential_loader)
