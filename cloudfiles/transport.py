"""HTTP transport for cloudfiles requests."""

from typing import Dict, Optional, Protocol, runtime_checkable

import requests

from cloudfiles.exceptions import ConnectionError, TimeoutError, TransportError
from cloudfiles.logging_config import get_logger
from cloudfiles.models import RequestDescriptor, TransportResult

logger = get_logger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Sends request descriptors and returns raw results.

    Implementations return a TransportResult for every HTTP response,
    whatever its status, and raise TransportError subclasses only for
    network-level failures.
    """

    def send(self, request: RequestDescriptor) -> TransportResult:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Transport backed by a requests session."""

    def __init__(
        self,
        timeout: float = 30,
        proxies: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize RequestsTransport.

        Args:
            timeout: Request timeout in seconds
            proxies: requests-style proxy mapping
            session: Session to reuse, a new one is created otherwise
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        if proxies:
            self.session.proxies.update(proxies)

    def send(self, request: RequestDescriptor) -> TransportResult:
        """Perform one HTTP round trip.

        Args:
            request: Request to send

        Returns:
            TransportResult with status, headers and body

        Raises:
            TimeoutError: If the request times out
            ConnectionError: If the server cannot be reached
            TransportError: On any other request failure
        """
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body or None,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.Timeout:
            logger.warning("request_timeout", method=request.method, url=request.url)
            raise TimeoutError("Request timed out")
        except requests.exceptions.ConnectionError as e:
            logger.warning("request_connection_failed", method=request.method, url=request.url)
            raise ConnectionError(f"Connection failed: {str(e)}")
        except requests.exceptions.RequestException as e:
            logger.warning("request_failed", method=request.method, url=request.url)
            raise TransportError(f"Request failed: {str(e)}") from e

        logger.debug(
            "request_sent",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
        )
        return TransportResult(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
