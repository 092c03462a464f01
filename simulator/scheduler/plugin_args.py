"""Typed argument schemas for scheduler plugins.

Each schema is tagged by its ``kind`` (``<PluginName>Args``) and carries the
defaults kube-scheduler applies for the v1beta2 API.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from simulator.constants import SCHEDULER_CONFIG_API_VERSION
from simulator.scheduler.base import SchemaModel


class ResourceSpec(SchemaModel):
    name: str
    weight: int = 1


class UtilizationShapePoint(SchemaModel):
    utilization: int
    score: int


class RequestedToCapacityRatioParam(SchemaModel):
    shape: list[UtilizationShapePoint] = Field(default_factory=list)


def _default_resources() -> list[ResourceSpec]:
    return [ResourceSpec(name="cpu", weight=1), ResourceSpec(name="memory", weight=1)]


class ScoringStrategy(SchemaModel):
    type: Literal["LeastAllocated", "MostAllocated", "RequestedToCapacityRatio"] = (
        "LeastAllocated"
    )
    resources: list[ResourceSpec] = Field(default_factory=_default_resources)
    requested_to_capacity_ratio: Optional[RequestedToCapacityRatioParam] = None


class PluginArgsBase(SchemaModel):
    api_version: str = SCHEDULER_CONFIG_API_VERSION


class DefaultPreemptionArgs(PluginArgsBase):
    kind: Literal["DefaultPreemptionArgs"] = "DefaultPreemptionArgs"
    min_candidate_nodes_percentage: int = 10
    min_candidate_nodes_absolute: int = 100


class InterPodAffinityArgs(PluginArgsBase):
    kind: Literal["InterPodAffinityArgs"] = "InterPodAffinityArgs"
    hard_pod_affinity_weight: int = 1


class NodeAffinityArgs(PluginArgsBase):
    kind: Literal["NodeAffinityArgs"] = "NodeAffinityArgs"
    # core/v1 NodeAffinity, kept as a plain document
    added_affinity: Optional[dict[str, Any]] = None


class NodeResourcesBalancedAllocationArgs(PluginArgsBase):
    kind: Literal["NodeResourcesBalancedAllocationArgs"] = (
        "NodeResourcesBalancedAllocationArgs"
    )
    resources: list[ResourceSpec] = Field(default_factory=_default_resources)


class NodeResourcesFitArgs(PluginArgsBase):
    kind: Literal["NodeResourcesFitArgs"] = "NodeResourcesFitArgs"
    ignored_resources: list[str] = Field(default_factory=list)
    ignored_resource_groups: list[str] = Field(default_factory=list)
    scoring_strategy: ScoringStrategy = Field(default_factory=ScoringStrategy)


class PodTopologySpreadArgs(PluginArgsBase):
    kind: Literal["PodTopologySpreadArgs"] = "PodTopologySpreadArgs"
    # core/v1 TopologySpreadConstraint documents
    default_constraints: list[dict[str, Any]] = Field(default_factory=list)
    defaulting_type: Literal["System", "List"] = "System"


class VolumeBindingArgs(PluginArgsBase):
    kind: Literal["VolumeBindingArgs"] = "VolumeBindingArgs"
    bind_timeout_seconds: int = 600
    shape: Optional[list[UtilizationShapePoint]] = None


PluginArgs = Annotated[
    Union[
        DefaultPreemptionArgs,
        InterPodAffinityArgs,
        NodeAffinityArgs,
        NodeResourcesBalancedAllocationArgs,
        NodeResourcesFitArgs,
        PodTopologySpreadArgs,
        VolumeBindingArgs,
    ],
    Field(discriminator="kind"),
]


class PluginArgsRegistry:
    """Maps plugin names to the schema their arguments decode into."""

    def __init__(self):
        self._schemas: dict[str, type[PluginArgsBase]] = {}

    def register(self, plugin_name: str, schema: type[PluginArgsBase]) -> None:
        if plugin_name in self._schemas:
            raise ValueError(f"Plugin {plugin_name} already has an args schema")
        self._schemas[plugin_name] = schema

    def lookup(self, plugin_name: str) -> Optional[type[PluginArgsBase]]:
        return self._schemas.get(plugin_name)

    def kind_for(self, plugin_name: str) -> str:
        return f"{plugin_name}Args"

    def __iter__(self):
        return iter(self._schemas.items())


PLUGIN_ARGS = PluginArgsRegistry()
PLUGIN_ARGS.register("DefaultPreemption", DefaultPreemptionArgs)
PLUGIN_ARGS.register("InterPodAffinity", InterPodAffinityArgs)
PLUGIN_ARGS.register("NodeAffinity", NodeAffinityArgs)
PLUGIN_ARGS.register(
    "NodeResourcesBalancedAllocation", NodeResourcesBalancedAllocationArgs
)
PLUGIN_ARGS.register("NodeResourcesFit", NodeResourcesFitArgs)
PLUGIN_ARGS.register("PodTopologySpread", PodTopologySpreadArgs)
PLUGIN_ARGS.register("VolumeBinding", VolumeBindingArgs)
