"""Shared fixtures for unit tests."""

from typing import Dict, List, Optional

import pytest

from cloudfiles.models import ConnectionConfig, RequestDescriptor, TransportResult


class StubTransport:
    """In-memory transport answering with queued or default results."""

    def __init__(self) -> None:
        self.requests: List[RequestDescriptor] = []
        self.queued: List[TransportResult] = []
        self.default = TransportResult(status_code=200)
        self.closed = False

    def respond(self, status_code: int, headers: Optional[Dict[str, str]] = None) -> None:
        self.queued.append(TransportResult(status_code=status_code, headers=headers or {}))

    def send(self, request: RequestDescriptor) -> TransportResult:
        self.requests.append(request)
        if self.queued:
            return self.queued.pop(0)
        return self.default

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> ConnectionConfig:
    """Fully populated connection config."""
    return ConnectionConfig(
        storage_url="https://storage.example.com/v1/acct",
        storage_token="storage-token",
        auth_token="auth-token",
        cdn_management_url="https://cdn.example.com/v1/acct",
    )


@pytest.fixture
def transport() -> StubTransport:
    """Stub transport answering 200 by default."""
    return StubTransport()
