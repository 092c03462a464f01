"""Scheduler configuration models for the kubescheduler.config.k8s.io/v1beta2 API.

Two forms of the configuration exist. ``RawKubeSchedulerConfiguration`` is
what the scheme produces from a document: plugin args are still untyped
mappings. ``KubeSchedulerConfiguration`` is the decoded form where every
plugin's args are an instance of its registered schema.
"""

from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from simulator.constants import (
    DEFAULT_SCHEDULER_NAME,
    SCHEDULER_CONFIG_API_VERSION,
    SCHEDULER_CONFIG_KIND,
)
from simulator.scheduler.base import SchemaModel
from simulator.scheduler.plugin_args import PluginArgs


class Plugin(SchemaModel):
    name: str
    weight: Optional[int] = None


class PluginSet(SchemaModel):
    enabled: list[Plugin] = Field(default_factory=list)
    disabled: list[Plugin] = Field(default_factory=list)


class Plugins(SchemaModel):
    """Plugins enabled or disabled at each extension point."""

    queue_sort: Optional[PluginSet] = None
    pre_filter: Optional[PluginSet] = None
    filter: Optional[PluginSet] = None
    post_filter: Optional[PluginSet] = None
    pre_score: Optional[PluginSet] = None
    score: Optional[PluginSet] = None
    reserve: Optional[PluginSet] = None
    permit: Optional[PluginSet] = None
    pre_bind: Optional[PluginSet] = None
    bind: Optional[PluginSet] = None
    post_bind: Optional[PluginSet] = None


class RawPluginConfig(SchemaModel):
    name: str
    # Any document; checked when the args are decoded
    args: Any = None


class PluginConfig(SchemaModel):
    name: str
    args: Optional[PluginArgs] = None


class _ProfileBase(SchemaModel):
    scheduler_name: str = DEFAULT_SCHEDULER_NAME
    plugins: Optional[Plugins] = None


class RawKubeSchedulerProfile(_ProfileBase):
    plugin_config: list[RawPluginConfig] = Field(default_factory=list)


class KubeSchedulerProfile(_ProfileBase):
    plugin_config: list[PluginConfig] = Field(default_factory=list)

    def plugin_args(self) -> dict[str, Any]:
        """Return the decoded args of each configured plugin, keyed by plugin name."""
        return {pc.name: pc.args for pc in self.plugin_config}


class LeaderElectionConfiguration(SchemaModel):
    leader_elect: bool = True
    lease_duration: str = "15s"
    renew_deadline: str = "10s"
    retry_period: str = "2s"
    resource_lock: str = "leases"
    resource_name: str = "kube-scheduler"
    resource_namespace: str = "kube-system"


class ClientConnectionConfiguration(SchemaModel):
    kubeconfig: str = ""
    accept_content_types: str = ""
    content_type: str = "application/vnd.kubernetes.protobuf"
    qps: float = 50
    burst: int = 100


class Extender(SchemaModel):
    url_prefix: str
    filter_verb: str = ""
    preempt_verb: str = ""
    prioritize_verb: str = ""
    weight: int = 0
    bind_verb: str = ""
    enable_https: bool = Field(default=False, alias="enableHTTPS")
    http_timeout: Optional[str] = None
    node_cache_capable: bool = False
    managed_resources: list[dict[str, Any]] = Field(default_factory=list)
    ignorable: bool = False


class SchedulerConfigurationBase(SchemaModel):
    api_version: Literal["kubescheduler.config.k8s.io/v1beta2"] = (
        SCHEDULER_CONFIG_API_VERSION
    )
    kind: Literal["KubeSchedulerConfiguration"] = SCHEDULER_CONFIG_KIND
    parallelism: int = 16
    leader_election: LeaderElectionConfiguration = Field(
        default_factory=LeaderElectionConfiguration
    )
    client_connection: ClientConnectionConfiguration = Field(
        default_factory=ClientConnectionConfiguration
    )
    healthz_bind_address: str = "0.0.0.0:10251"
    metrics_bind_address: str = "0.0.0.0:10251"
    percentage_of_nodes_to_score: int = 0
    pod_initial_backoff_seconds: int = 1
    pod_max_backoff_seconds: int = 10
    extenders: list[Extender] = Field(default_factory=list)


class RawKubeSchedulerConfiguration(SchedulerConfigurationBase):
    profiles: list[RawKubeSchedulerProfile] = Field(
        default_factory=lambda: [RawKubeSchedulerProfile()]
    )

    @field_validator("profiles")
    @classmethod
    def default_profiles(cls, v):
        # kube-scheduler runs a single default profile when none is configured
        return v or [RawKubeSchedulerProfile()]


class KubeSchedulerConfiguration(SchedulerConfigurationBase):
    """Scheduler configuration with every plugin's args fully decoded."""

    profiles: list[KubeSchedulerProfile] = Field(
        default_factory=lambda: [KubeSchedulerProfile()]
    )

    def profile(self, scheduler_name: str) -> Optional[KubeSchedulerProfile]:
        """Return the profile for a scheduler name, if any."""
        for profile in self.profiles:
            if profile.scheduler_name == scheduler_name:
                return profile
        return None
