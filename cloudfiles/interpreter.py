"""Maps transport results onto domain outcomes."""

from typing import Optional

from cloudfiles.exceptions import (
    ContainerAlreadyPublicError,
    ContainerNotFoundError,
    InvalidCredentialError,
    InvalidETagError,
    StorageItemNotFoundError,
    TransportError,
)
from cloudfiles.models import TransportResult
from cloudfiles.request_builder import CDN_URI_HEADER


def _unmapped(result: TransportResult) -> TransportError:
    detail = result.body.decode("utf-8", errors="replace").strip()
    message = f"HTTP {result.status_code}"
    if detail:
        message = f"{message}: {detail}"
    return TransportError(message, status_code=result.status_code, headers=result.headers)


def interpret_put(result: TransportResult) -> None:
    """Interpret an object upload.

    Raises:
        ContainerNotFoundError: On 400
        InvalidETagError: On 422
        TransportError: On any other non-2xx status
    """
    if result.succeeded:
        return
    if result.status_code == 400:
        raise ContainerNotFoundError()
    if result.status_code == 422:
        raise InvalidETagError()
    raise _unmapped(result)


def interpret_delete(result: TransportResult, name: str) -> None:
    """Interpret an object deletion.

    Raises:
        StorageItemNotFoundError: On 404
        TransportError: On any other non-2xx status
    """
    if result.succeeded:
        return
    if result.status_code == 404:
        raise StorageItemNotFoundError(name)
    raise _unmapped(result)


def interpret_head(result: TransportResult) -> bool:
    """Interpret an object metadata probe; a 404 means absent, not an error."""
    if result.succeeded:
        return True
    if result.status_code == 404:
        return False
    raise _unmapped(result)


def interpret_mark_public(result: TransportResult) -> Optional[str]:
    """Interpret a CDN-enable request.

    A 202 is treated as "already public" even though it is a 2xx status.

    Returns:
        The CDN URI header value, or None when the server sent none

    Raises:
        InvalidCredentialError: On 401
        ContainerAlreadyPublicError: On 202
        TransportError: On any other non-2xx status
    """
    if result.status_code == 401:
        raise InvalidCredentialError()
    if result.status_code == 202:
        raise ContainerAlreadyPublicError()
    if not result.succeeded:
        raise _unmapped(result)
    return result.header(CDN_URI_HEADER)
