"""Providers resolving a cluster client configuration from the environment."""

import logging
from typing import Optional

import kubernetes
import kubernetes.client
import kubernetes.config

from .types import CredentialError, CredentialProvider


logger = logging.getLogger(__name__)


class KubeConfigCredentialProvider(CredentialProvider):
    """Client configuration from kubeconfig files.

    Follows the ``KUBECONFIG`` search list, falling back to ``~/.kube/config``.
    """

    name = "kubeconfig"

    def __init__(
        self, config_file: Optional[str] = None, context: Optional[str] = None
    ):
        """
        Args:
            config_file: Explicit kubeconfig path, otherwise the default loading rules apply
            context: Context to use instead of the kubeconfig's current-context
        """
        self.config_file = config_file
        self.context = context

    def get_client_config(self) -> kubernetes.client.Configuration:
        client_config = kubernetes.client.Configuration()
        try:
            kubernetes.config.load_kube_config(
                config_file=self.config_file,
                context=self.context,
                client_configuration=client_config,
                persist_config=False,
            )
        except (kubernetes.config.ConfigException, OSError) as e:
            raise CredentialError(f"Cannot load kubeconfig: {e}") from e
        logger.info("Loaded cluster client configuration from kubeconfig")
        return client_config


class InClusterCredentialProvider(CredentialProvider):
    """Client configuration from the pod's service account."""

    name = "in-cluster"

    def get_client_config(self) -> kubernetes.client.Configuration:
        client_config = kubernetes.client.Configuration()
        try:
            kubernetes.config.load_incluster_config(client_configuration=client_config)
        except kubernetes.config.ConfigException as e:
            raise CredentialError(f"Not running in a cluster: {e}") from e
        logger.info("Loaded in-cluster client configuration")
        return client_config


def load_ambient_cluster_credential(
    context: Optional[str] = None,
) -> kubernetes.client.Configuration:
    """Resolve a cluster client configuration from the ambient environment.

    Kubeconfig files are tried first, then the in-cluster service account.

    Args:
        context: Kubeconfig context overriding the current-context

    Returns:
        kubernetes.client.Configuration: The first configuration that loads

    Raises:
        CredentialError: If no provider can produce a configuration
    """
    providers: list[CredentialProvider] = [
        KubeConfigCredentialProvider(context=context),
        InClusterCredentialProvider(),
    ]

    failures = []
    for provider in providers:
        try:
            return provider.get_client_config()
        except CredentialError as e:
            logger.debug("Provider %s failed: %s", provider.name, e)
            failures.append(f"{provider.name}: {e}")

    raise CredentialError(
        "No cluster client configuration found (" + "; ".join(failures) + ")"
    )
