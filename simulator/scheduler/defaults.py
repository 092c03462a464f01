"""Built-in scheduler configuration used when no config file is given."""

from simulator.scheduler.plugin_args import (
    DefaultPreemptionArgs,
    InterPodAffinityArgs,
    NodeAffinityArgs,
    NodeResourcesBalancedAllocationArgs,
    NodeResourcesFitArgs,
    PodTopologySpreadArgs,
    VolumeBindingArgs,
)
from simulator.scheduler.types import (
    KubeSchedulerConfiguration,
    KubeSchedulerProfile,
    Plugin,
    PluginConfig,
    Plugins,
    PluginSet,
)


def _enabled(*names: str) -> PluginSet:
    return PluginSet(enabled=[Plugin(name=name) for name in names])


def default_plugins() -> Plugins:
    """Return the plugins kube-scheduler enables by default at each extension point."""
    return Plugins(
        queue_sort=_enabled("PrioritySort"),
        pre_filter=_enabled(
            "NodeResourcesFit",
            "NodePorts",
            "VolumeRestrictions",
            "PodTopologySpread",
            "InterPodAffinity",
            "VolumeBinding",
            "NodeAffinity",
        ),
        filter=_enabled(
            "NodeUnschedulable",
            "NodeName",
            "TaintToleration",
            "NodeAffinity",
            "NodePorts",
            "NodeResourcesFit",
            "VolumeRestrictions",
            "EBSLimits",
            "GCEPDLimits",
            "NodeVolumeLimits",
            "AzureDiskLimits",
            "VolumeBinding",
            "VolumeZone",
            "PodTopologySpread",
            "InterPodAffinity",
        ),
        post_filter=_enabled("DefaultPreemption"),
        pre_score=_enabled(
            "InterPodAffinity", "PodTopologySpread", "TaintToleration", "NodeAffinity"
        ),
        score=PluginSet(
            enabled=[
                Plugin(name="NodeResourcesBalancedAllocation", weight=1),
                Plugin(name="ImageLocality", weight=1),
                Plugin(name="InterPodAffinity", weight=1),
                Plugin(name="NodeResourcesFit", weight=1),
                Plugin(name="NodeAffinity", weight=1),
                # Weight is doubled because:
                # - This is a score coming from user preference.
                # - It makes its signal comparable to NodeResourcesFit.LeastAllocated.
                Plugin(name="PodTopologySpread", weight=2),
                Plugin(name="TaintToleration", weight=1),
            ]
        ),
        reserve=_enabled("VolumeBinding"),
        pre_bind=_enabled("VolumeBinding"),
        bind=_enabled("DefaultBinder"),
    )


def default_plugin_config() -> list[PluginConfig]:
    return [
        PluginConfig(name="DefaultPreemption", args=DefaultPreemptionArgs()),
        PluginConfig(name="InterPodAffinity", args=InterPodAffinityArgs()),
        PluginConfig(name="NodeAffinity", args=NodeAffinityArgs()),
        PluginConfig(
            name="NodeResourcesBalancedAllocation",
            args=NodeResourcesBalancedAllocationArgs(),
        ),
        PluginConfig(name="NodeResourcesFit", args=NodeResourcesFitArgs()),
        PluginConfig(name="PodTopologySpread", args=PodTopologySpreadArgs()),
        PluginConfig(name="VolumeBinding", args=VolumeBindingArgs()),
    ]


def default_scheduler_config() -> KubeSchedulerConfiguration:
    """Return the default scheduler configuration.

    A single ``default-scheduler`` profile with the default plugin set and the
    default args of every plugin that takes args.
    """
    return KubeSchedulerConfiguration(
        profiles=[
            KubeSchedulerProfile(
                plugins=default_plugins(),
                plugin_config=default_plugin_config(),
            )
        ]
    )
