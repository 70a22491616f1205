"""Exceptions for the cloudfiles SDK."""

from typing import Dict, Optional


class CloudFilesError(Exception):
    """Base exception for all cloudfiles errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """Initialize CloudFilesError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidArgumentError(CloudFilesError, ValueError):
    """Raised when a required argument or setting is missing or empty."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ContainerNotFoundError(CloudFilesError):
    """Raised when the target container does not exist."""

    def __init__(
        self, message: str = "The requested container does not exist"
    ) -> None:
        super().__init__(message, status_code=400)


class InvalidETagError(CloudFilesError):
    """Raised when the server computed a different checksum than the one sent."""

    def __init__(
        self,
        message: str = (
            "The ETag supplied in the request does not match "
            "the ETag calculated by the server"
        ),
    ) -> None:
        super().__init__(message, status_code=422)


class StorageItemNotFoundError(CloudFilesError):
    """Raised when a storage object is not found."""

    def __init__(self, name: str, status_code: Optional[int] = 404) -> None:
        """Initialize StorageItemNotFoundError.

        Args:
            name: Object name that was not found
            status_code: 404 when the server reported it, None for a cache miss
        """
        super().__init__(f"Storage item not found: {name}", status_code=status_code)
        self.name = name


class InvalidCredentialError(CloudFilesError):
    """Raised when the supplied credentials lack permission."""

    def __init__(
        self,
        message: str = "You do not have permission to mark this container as public.",
    ) -> None:
        super().__init__(message, status_code=401)


class ContainerAlreadyPublicError(CloudFilesError):
    """Raised when the CDN endpoint answers 202 to a mark-public request."""

    def __init__(
        self, message: str = "The specified container is already marked as public."
    ) -> None:
        super().__init__(message, status_code=202)


class TransportError(CloudFilesError):
    """Raised for any HTTP failure without a domain-specific mapping."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialize TransportError.

        Args:
            message: Error message
            status_code: HTTP status code, None for network-level failures
            headers: Response headers, if a response was received
        """
        super().__init__(message, status_code=status_code)
        self.headers = dict(headers or {})


class ConnectionError(TransportError):
    """Raised when connection to the server fails."""

    pass


class TimeoutError(TransportError):
    """Raised when a request times out."""

    pass
