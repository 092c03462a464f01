"""Decode scheduler configuration documents into typed configuration."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from simulator.constants import SCHEDULER_CONFIG_API_VERSION
from simulator.scheduler.plugin_args import PLUGIN_ARGS, PluginArgsBase, PluginArgsRegistry
from simulator.scheduler.scheme import SCHEME, DecodeError, Scheme
from simulator.scheduler.types import (
    KubeSchedulerConfiguration,
    KubeSchedulerProfile,
    PluginConfig,
    RawKubeSchedulerConfiguration,
    SchedulerConfigurationBase,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DecodeError",
    "decode_nested_objects",
    "decode_plugin_args",
    "decode_scheduler_config",
]


def decode_plugin_args(
    plugin_name: str,
    args: Any,
    registry: PluginArgsRegistry = PLUGIN_ARGS,
) -> Optional[PluginArgsBase]:
    """Decode one plugin's raw args into the schema registered for the plugin.

    Raises:
        DecodeError: If the plugin has no registered schema or the args do
            not match it
    """
    if args is None:
        return None
    if not isinstance(args, dict):
        raise DecodeError(
            "decode nested plugin args",
            plugin_name,
            f"args must be a mapping, got {type(args).__name__}",
        )

    expected_kind = registry.kind_for(plugin_name)
    schema = registry.lookup(plugin_name)
    if schema is None:
        raise DecodeError(
            "decode nested plugin args",
            plugin_name,
            f"no kind {expected_kind} is registered for {SCHEDULER_CONFIG_API_VERSION}",
        )

    kind = args.get("kind")
    if kind is not None and kind != expected_kind:
        raise DecodeError(
            "decode nested plugin args",
            plugin_name,
            f"args were not of type {expected_kind}, got {kind}",
        )
    api_version = args.get("apiVersion")
    if api_version is not None and api_version != SCHEDULER_CONFIG_API_VERSION:
        raise DecodeError(
            "decode nested plugin args",
            plugin_name,
            f"args have apiVersion {api_version}, expected {SCHEDULER_CONFIG_API_VERSION}",
        )

    try:
        return schema.model_validate(args)
    except ValidationError as e:
        raise DecodeError("decode nested plugin args", plugin_name, str(e)) from e


def decode_nested_objects(
    raw: RawKubeSchedulerConfiguration, registry: PluginArgsRegistry = PLUGIN_ARGS
) -> KubeSchedulerConfiguration:
    """Decode the plugin args of every profile, returning the typed configuration."""
    profiles = []
    for raw_profile in raw.profiles:
        plugin_config = [
            PluginConfig(
                name=pc.name, args=decode_plugin_args(pc.name, pc.args, registry)
            )
            for pc in raw_profile.plugin_config
        ]
        profiles.append(
            KubeSchedulerProfile(
                scheduler_name=raw_profile.scheduler_name,
                plugins=raw_profile.plugins,
                plugin_config=plugin_config,
            )
        )

    fields = {
        name: getattr(raw, name) for name in SchedulerConfigurationBase.model_fields
    }
    return KubeSchedulerConfiguration(**fields, profiles=profiles)


def decode_scheduler_config(
    data: bytes, scheme: Scheme = SCHEME
) -> KubeSchedulerConfiguration:
    """Decode a KubeSchedulerConfiguration document.

    Args:
        data: YAML or JSON document

    Returns:
        KubeSchedulerConfiguration: Configuration with every plugin's args typed

    Raises:
        DecodeError: If the document kind is not recognized, is not a
            scheduler configuration, or any plugin's args fail to decode
    """
    obj = scheme.decode(data)

    if not isinstance(obj, RawKubeSchedulerConfiguration):
        raise DecodeError(
            "type mismatch",
            detail=f"expected KubeSchedulerConfiguration, got {type(obj).__name__}",
        )

    config = decode_nested_objects(obj)
    logger.debug(
        "Decoded scheduler configuration with %d profile(s)", len(config.profiles)
    )
    return config
