"""Shared pytest fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


MINIMAL_SCHEDULER_CONFIG = """\
apiVersion: kubescheduler.config.k8s.io/v1beta2
kind: KubeSchedulerConfiguration
profiles:
  - schedulerName: default-scheduler
    plugins:
      score:
        enabled:
          - name: NodeResourcesFit
            weight: 2
    pluginConfig:
      - name: NodeResourcesFit
        args:
          scoringStrategy:
            type: MostAllocated
            resources:
              - name: cpu
                weight: 3
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir):
    """Write content to a file in the temporary directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_scheduler_config():
    """Minimal scheduler configuration document as bytes."""
    return MINIMAL_SCHEDULER_CONFIG.encode()


@pytest.fixture
def scheduler_config_file(write_file):
    """Minimal scheduler configuration with one plugin carrying args."""
    return write_file("scheduler.yaml", MINIMAL_SCHEDULER_CONFIG)


@pytest.fixture
def settings_file(write_file, scheduler_config_file):
    """Settings file using every recognized key."""
    return write_file(
        "config.yml",
        f"""\
Port: 1212
EtcdURL: http://127.0.0.1:2379
CorsAllowedOriginList:
  - http://localhost:3000
  - http://localhost:3001
KubeConfig: /root/.kube/config
KubeApiHost: 10.0.0.1
KubeApiPort: 3131
KubeSchedulerConfigPath: {scheduler_config_file}
ExternalImportEnabled: false
ExternalSchedulerEnabled: true
""",
    )
