"""Tests for simulator.scheduler.defaults module."""

from simulator.scheduler import KubeSchedulerConfiguration, default_scheduler_config
from simulator.scheduler.plugin_args import (
    NodeResourcesBalancedAllocationArgs,
    NodeResourcesFitArgs,
    PodTopologySpreadArgs,
)


class TestDefaultSchedulerConfig:
    """Test cases for default_scheduler_config."""

    def test_single_default_profile(self):
        """Test the default configuration has one default-scheduler profile."""
        config = default_scheduler_config()

        assert isinstance(config, KubeSchedulerConfiguration)
        assert config.api_version == "kubescheduler.config.k8s.io/v1beta2"
        assert config.kind == "KubeSchedulerConfiguration"
        assert [p.scheduler_name for p in config.profiles] == ["default-scheduler"]

    def test_default_plugins(self):
        """Test the default plugin set of the extension points."""
        plugins = default_scheduler_config().profiles[0].plugins

        assert [p.name for p in plugins.queue_sort.enabled] == ["PrioritySort"]
        assert [p.name for p in plugins.bind.enabled] == ["DefaultBinder"]
        assert [p.name for p in plugins.post_filter.enabled] == ["DefaultPreemption"]
        weights = {p.name: p.weight for p in plugins.score.enabled}
        assert weights["PodTopologySpread"] == 2
        assert weights["NodeResourcesFit"] == 1

    def test_every_plugin_with_args_is_typed(self):
        """Test every default plugin config carries typed args."""
        plugin_args = default_scheduler_config().profiles[0].plugin_args()

        assert set(plugin_args) == {
            "DefaultPreemption",
            "InterPodAffinity",
            "NodeAffinity",
            "NodeResourcesBalancedAllocation",
            "NodeResourcesFit",
            "PodTopologySpread",
            "VolumeBinding",
        }
        assert isinstance(plugin_args["NodeResourcesFit"], NodeResourcesFitArgs)
        assert plugin_args["NodeResourcesFit"].scoring_strategy.type == "LeastAllocated"
        assert isinstance(
            plugin_args["NodeResourcesBalancedAllocation"],
            NodeResourcesBalancedAllocationArgs,
        )
        assert isinstance(plugin_args["PodTopologySpread"], PodTopologySpreadArgs)
        assert plugin_args["PodTopologySpread"].defaulting_type == "System"

    def test_deterministic(self):
        """Test each call returns an equal but independent configuration."""
        first = default_scheduler_config()
        second = default_scheduler_config()

        assert first == second
        assert first is not second

    def test_document_round_trip(self):
        """Test the default configuration serializes with camelCase keys."""
        document = default_scheduler_config().to_document()

        assert document["apiVersion"] == "kubescheduler.config.k8s.io/v1beta2"
        profile = document["profiles"][0]
        assert profile["schedulerName"] == "default-scheduler"
        fit = next(
            pc for pc in profile["pluginConfig"] if pc["name"] == "NodeResourcesFit"
        )
        assert fit["args"]["kind"] == "NodeResourcesFitArgs"
        assert fit["args"]["scoringStrategy"]["type"] == "LeastAllocated"
