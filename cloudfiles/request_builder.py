"""Request construction for storage and CDN operations."""

import hashlib
import mimetypes
import os
from typing import BinaryIO, Dict, Optional, Tuple, Union
from urllib.parse import quote

from cloudfiles.exceptions import InvalidArgumentError
from cloudfiles.models import ConnectionConfig, RequestDescriptor

AUTH_TOKEN_HEADER = "X-Auth-Token"
CDN_ENABLED_HEADER = "X-CDN-Enabled"
CDN_URI_HEADER = "X-CDN-URI"
META_HEADER_PREFIX = "X-Object-Meta-"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def read_body(data: Union[bytes, BinaryIO]) -> bytes:
    """Read request data into memory.

    Args:
        data: Bytes or a readable binary stream

    Returns:
        The full body
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    return data.read()


def read_local_file(path: str) -> Tuple[str, bytes]:
    """Resolve a local path into a remote name and body.

    The remote name is the path's basename. A path that is not an existing
    file yields an empty body.

    Args:
        path: Local file path

    Returns:
        Tuple of (remote_name, body)
    """
    remote_name = os.path.basename(path)
    if not os.path.isfile(path):
        return remote_name, b""
    with open(path, "rb") as f:
        return remote_name, f.read()


class RequestBuilder:
    """Builds request descriptors from a connection configuration."""

    def __init__(self, config: ConnectionConfig) -> None:
        """Initialize RequestBuilder.

        Args:
            config: Endpoints and tokens to address requests with
        """
        self.config = config

    def _object_url(self, container: str, name: str) -> str:
        if not container or not name:
            raise InvalidArgumentError("Container name and object name are required")
        self.config.validate_for_storage()
        return f"{self.config.storage_url}/{quote(container, safe='')}/{quote(name)}"

    def _storage_headers(self) -> Dict[str, str]:
        return {AUTH_TOKEN_HEADER: self.config.storage_token or ""}

    def put_object(
        self,
        container: str,
        name: str,
        data: Union[bytes, BinaryIO] = b"",
        meta_tags: Optional[Dict[str, str]] = None,
    ) -> RequestDescriptor:
        """Build an object upload.

        Args:
            container: Container name
            name: Remote object name
            data: Object data (bytes or file-like object)
            meta_tags: Metadata sent as X-Object-Meta-* headers

        Returns:
            PUT request descriptor
        """
        url = self._object_url(container, name)
        body = read_body(data)

        headers = self._storage_headers()
        headers["ETag"] = hashlib.md5(body, usedforsecurity=False).hexdigest()
        headers["Content-Type"] = mimetypes.guess_type(name)[0] or DEFAULT_CONTENT_TYPE
        headers["Content-Length"] = str(len(body))
        for key, value in (meta_tags or {}).items():
            headers[f"{META_HEADER_PREFIX}{key}"] = value

        return RequestDescriptor(method="PUT", url=url, headers=headers, body=body)

    def delete_object(self, container: str, name: str) -> RequestDescriptor:
        """Build an object deletion."""
        url = self._object_url(container, name)
        return RequestDescriptor(method="DELETE", url=url, headers=self._storage_headers())

    def head_object(self, container: str, name: str) -> RequestDescriptor:
        """Build an object metadata probe."""
        url = self._object_url(container, name)
        return RequestDescriptor(method="HEAD", url=url, headers=self._storage_headers())

    def mark_container_public(self, container: str) -> RequestDescriptor:
        """Build a CDN-enable request for a container.

        Args:
            container: Container name

        Returns:
            PUT request descriptor addressed to the CDN management endpoint
        """
        if not container:
            raise InvalidArgumentError("Container name is required")
        self.config.validate_for_cdn()
        url = f"{self.config.cdn_management_url}/{quote(container, safe='')}"
        headers = {
            AUTH_TOKEN_HEADER: self.config.auth_token or "",
            CDN_ENABLED_HEADER: "True",
        }
        return RequestDescriptor(method="PUT", url=url, headers=headers)
