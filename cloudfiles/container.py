"""Container entity: CRUD over one server-side container."""

import io
from typing import BinaryIO, Dict, Iterator, Optional, Tuple

from cloudfiles.exceptions import InvalidArgumentError, StorageItemNotFoundError
from cloudfiles.interpreter import (
    interpret_delete,
    interpret_head,
    interpret_mark_public,
    interpret_put,
)
from cloudfiles.logging_config import get_logger
from cloudfiles.models import ConnectionConfig, RequestDescriptor, StorageObject, TransportResult
from cloudfiles.request_builder import RequestBuilder, read_local_file
from cloudfiles.transport import RequestsTransport, Transport

logger = get_logger(__name__)


class Container:
    """A named container and the objects this instance has added to it.

    The local object cache only records operations performed through this
    instance since construction. It is never refreshed from the server, so
    it is not a listing of the container: other clients, or other Container
    instances for the same name, can make it stale.

    Example:
        container = Container("photos", config=ConnectionConfig(
            storage_url="https://storage.example.com/v1/acct",
            storage_token="token",
        ))
        container.add_object_from_bytes(b"...", "cat.png")
        assert container.object_exists("cat.png")
        container.delete_object("cat.png")
    """

    def __init__(
        self,
        name: str,
        config: Optional[ConnectionConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """Initialize Container.

        Args:
            name: Container name, unique within the account
            config: Endpoints and tokens; may be supplied later via configure()
            transport: Transport to send requests with; defaults to RequestsTransport
        """
        self._name = name
        self._config = config
        self._transport = transport
        self._owns_transport = transport is None
        self._objects: Dict[str, StorageObject] = {}
        self.public_url: Optional[str] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> Optional[ConnectionConfig]:
        return self._config

    @config.setter
    def config(self, config: ConnectionConfig) -> None:
        self.configure(config)

    def configure(self, config: ConnectionConfig) -> None:
        """Assign the endpoints and tokens used by subsequent operations.

        Raises:
            InvalidArgumentError: If config is None
        """
        if config is None:
            raise InvalidArgumentError("Connection config is required")
        self._config = config
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    @property
    def objects(self) -> Tuple[StorageObject, ...]:
        """Snapshot of the locally cached objects, in insertion order."""
        return tuple(self._objects.values())

    @property
    def object_names(self) -> Tuple[str, ...]:
        return tuple(self._objects)

    def get_object(self, name: str) -> StorageObject:
        """Return a cached object without contacting the server.

        Raises:
            InvalidArgumentError: If name is empty
            StorageItemNotFoundError: If the name is not cached
        """
        if not name:
            raise InvalidArgumentError("Object name is required")
        try:
            return self._objects[name]
        except KeyError:
            raise StorageItemNotFoundError(name, status_code=None) from None

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __iter__(self) -> Iterator[StorageObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"Container(name={self._name!r}, objects={len(self._objects)})"

    def close(self) -> None:
        """Close the transport if this container created it."""
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    def __enter__(self) -> "Container":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()

    def _builder(self) -> RequestBuilder:
        if self._config is None:
            raise InvalidArgumentError("Connection is not configured")
        return RequestBuilder(self._config)

    def _send(self, request: RequestDescriptor) -> TransportResult:
        if self._transport is None:
            self._transport = RequestsTransport(
                timeout=self._config.timeout,
                proxies=self._config.credentials.proxies(),
            )
        return self._transport.send(request)

    def _remember(self, name: str, meta_tags: Dict[str, str]) -> StorageObject:
        storage_object = StorageObject(
            name=name, meta_tags=meta_tags, public_url=self.public_url
        )
        if name not in self._objects:
            self._objects[name] = storage_object
        return storage_object

    def add_object(
        self, name: str, meta_tags: Optional[Dict[str, str]] = None
    ) -> StorageObject:
        """Upload a local file as an object.

        The remote name is the basename of ``name``; if ``name`` is not an
        existing file an empty object is created. The returned object and the
        cache entry keep ``name`` as given.

        Later calls address the server by the name they are given, so for a
        path with directories delete_object and object_exists reach a
        different remote object than the one uploaded here (its basename),
        and the basename is not in the cache. Use add_object_from_stream to
        upload such files under a name that works for both.

        Args:
            name: Local file path
            meta_tags: Metadata tags to attach

        Returns:
            The new StorageObject

        Raises:
            InvalidArgumentError: If name is empty
            ContainerNotFoundError: If the server answers 400
            InvalidETagError: If the server answers 422
            TransportError: On any other failure
        """
        if not name:
            raise InvalidArgumentError("Object name is required")
        meta_tags = dict(meta_tags or {})

        remote_name, body = read_local_file(name)
        request = self._builder().put_object(self._name, remote_name, body, meta_tags)
        interpret_put(self._send(request))
        logger.debug("object_added", container=self._name, object=name)

        return self._remember(name, meta_tags)

    def add_object_from_stream(
        self,
        stream: BinaryIO,
        remote_name: str,
        meta_tags: Optional[Dict[str, str]] = None,
    ) -> StorageObject:
        """Upload a byte stream as an object.

        Args:
            stream: Readable binary stream with the object data
            remote_name: Object name within the container
            meta_tags: Metadata tags to attach

        Returns:
            The new StorageObject

        Raises:
            InvalidArgumentError: If remote_name is empty or stream is None
            ContainerNotFoundError: If the server answers 400
            InvalidETagError: If the server answers 422
            TransportError: On any other failure
        """
        if not remote_name or stream is None:
            raise InvalidArgumentError("Object stream and remote object name are required")
        meta_tags = dict(meta_tags or {})

        request = self._builder().put_object(self._name, remote_name, stream, meta_tags)
        interpret_put(self._send(request))
        logger.debug("object_added", container=self._name, object=remote_name)

        return self._remember(remote_name, meta_tags)

    def add_object_from_bytes(
        self,
        data: bytes,
        remote_name: str,
        meta_tags: Optional[Dict[str, str]] = None,
    ) -> StorageObject:
        """Upload in-memory bytes as an object; see add_object_from_stream."""
        if data is None:
            raise InvalidArgumentError("Object data is required")
        return self.add_object_from_stream(io.BytesIO(data), remote_name, meta_tags)

    def delete_object(self, name: str) -> None:
        """Delete an object and drop it from the local cache.

        Raises:
            InvalidArgumentError: If name is empty
            StorageItemNotFoundError: If the server answers 404, or if the
                name is not in the local cache after the server call
            TransportError: On any other failure
        """
        if not name:
            raise InvalidArgumentError("Object name is required")

        request = self._builder().delete_object(self._name, name)
        interpret_delete(self._send(request), name)

        if name not in self._objects:
            logger.info("object_not_cached", container=self._name, object=name)
            raise StorageItemNotFoundError(name, status_code=None)
        del self._objects[name]
        logger.debug("object_deleted", container=self._name, object=name)

    def mark_as_public(self) -> None:
        """Enable CDN delivery for this container and record its public URL.

        Raises:
            InvalidCredentialError: If the CDN endpoint answers 401
            ContainerAlreadyPublicError: If the CDN endpoint answers 202
            TransportError: On any other failure
        """
        request = self._builder().mark_container_public(self._name)
        self.public_url = interpret_mark_public(self._send(request))
        logger.info("container_marked_public", container=self._name, public_url=self.public_url)

    def object_exists(self, name: str) -> bool:
        """Check an object against both the server and the local cache.

        Returns True only if the server confirms the object and this instance
        has it cached; a server-side object never added through this instance
        reports False.

        Raises:
            InvalidArgumentError: If name is empty
            TransportError: On any failure other than 404
        """
        if not name:
            raise InvalidArgumentError("Object name is required")

        request = self._builder().head_object(self._name, name)
        return interpret_head(self._send(request)) and name in self._objects
