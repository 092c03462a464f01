"""Scheduler configuration types, defaults and decoding."""

from .decoder import DecodeError, decode_scheduler_config
from .defaults import default_scheduler_config
from .types import KubeSchedulerConfiguration, KubeSchedulerProfile, PluginConfig

__all__ = [
    "DecodeError",
    "KubeSchedulerConfiguration",
    "KubeSchedulerProfile",
    "PluginConfig",
    "decode_scheduler_config",
    "default_scheduler_config",
]
