import kubernetes.client


class CredentialError(Exception):
    """Exception raised when no cluster client configuration can be resolved."""


class CredentialProvider:
    """Base class for cluster client configuration providers."""

    name = "base"

    def get_client_config(self) -> kubernetes.client.Configuration:
        """Get a client configuration for the cluster.

        Returns:
            kubernetes.client.Configuration: Configuration to build API clients from

        Raises:
            CredentialError: If the configuration cannot be loaded
        """
        raise NotImplementedError
