"""Cluster client configuration for importing resources from an existing cluster."""

from .types import CredentialError, CredentialProvider
from .providers import (
    InClusterCredentialProvider,
    KubeConfigCredentialProvider,
    load_ambient_cluster_credential,
)

__all__ = [
    "CredentialError",
    "CredentialProvider",
    "InClusterCredentialProvider",
    "KubeConfigCredentialProvider",
    "load_ambient_cluster_credential",
]
