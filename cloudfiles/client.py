"""Client façade sharing one configuration and transport across containers."""

from typing import Optional

from cloudfiles.container import Container
from cloudfiles.exceptions import InvalidArgumentError
from cloudfiles.models import ConnectionConfig
from cloudfiles.transport import RequestsTransport, Transport


class CloudFilesClient:
    """Entry point for working with containers.

    Example:
        config = ConnectionConfig(
            storage_url="https://storage.example.com/v1/acct",
            storage_token="storage-token",
            auth_token="auth-token",
            cdn_management_url="https://cdn.example.com/v1/acct",
        )
        with CloudFilesClient(config) as client:
            photos = client.container("photos")
            photos.add_object_from_bytes(b"...", "cat.png", {"owner": "me"})
            photos.mark_as_public()
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """Initialize CloudFilesClient.

        Args:
            config: Endpoints and tokens; read from the environment when omitted
            transport: Transport shared by every container; defaults to RequestsTransport
        """
        self.config = config if config is not None else ConnectionConfig.from_env()
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else self._default_transport()

    def _default_transport(self) -> RequestsTransport:
        return RequestsTransport(
            timeout=self.config.timeout,
            proxies=self.config.credentials.proxies(),
        )

    def configure(self, config: ConnectionConfig) -> None:
        """Replace the configuration used for containers created afterwards.

        A default transport is rebuilt so the new timeout and proxy apply;
        an injected transport is kept as is.
        """
        if config is None:
            raise InvalidArgumentError("Connection config is required")
        self.config = config
        if self._owns_transport:
            self.transport.close()
            self.transport = self._default_transport()

    def container(self, name: str) -> Container:
        """Return a Container bound to this client's config and transport.

        Raises:
            InvalidArgumentError: If name is empty
        """
        if not name:
            raise InvalidArgumentError("Container name is required")
        return Container(name, config=self.config, transport=self.transport)

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> "CloudFilesClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
