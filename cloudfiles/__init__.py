"""CloudFiles Python SDK.

A synchronous client for CloudFiles-style object storage: container and
object management plus CDN publishing.
"""

from cloudfiles.client import CloudFilesClient
from cloudfiles.container import Container
from cloudfiles.models import (
    ConnectionConfig,
    RequestDescriptor,
    StorageObject,
    TransportResult,
    UserCredentials,
)
from cloudfiles.exceptions import (
    CloudFilesError,
    ConnectionError,
    ContainerAlreadyPublicError,
    ContainerNotFoundError,
    InvalidArgumentError,
    InvalidCredentialError,
    InvalidETagError,
    StorageItemNotFoundError,
    TimeoutError,
    TransportError,
)
from cloudfiles.transport import RequestsTransport, Transport

__version__ = "0.1.0"
__all__ = [
    "CloudFilesClient",
    "CloudFilesError",
    "ConnectionConfig",
    "ConnectionError",
    "Container",
    "ContainerAlreadyPublicError",
    "ContainerNotFoundError",
    "InvalidArgumentError",
    "InvalidCredentialError",
    "InvalidETagError",
    "RequestDescriptor",
    "RequestsTransport",
    "StorageItemNotFoundError",
    "StorageObject",
    "TimeoutError",
    "Transport",
    "TransportError",
    "TransportResult",
    "UserCredentials",
]
