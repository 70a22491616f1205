"""Data models for the cloudfiles SDK."""

import os
from typing import Dict, List, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cloudfiles.exceptions import InvalidArgumentError


class UserCredentials(BaseModel):
    """Opaque credential bundle obtained out-of-band."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: Optional[str] = Field(None, description="Account user name")
    api_key: Optional[str] = Field(None, description="Account API key")
    proxy: Optional[str] = Field(None, description="HTTP(S) proxy URL")
    proxy_username: Optional[str] = Field(None, description="Proxy user name")
    proxy_password: Optional[str] = Field(None, description="Proxy password")

    def proxies(self) -> Optional[Dict[str, str]]:
        """Build a requests-style proxy mapping.

        Returns:
            Mapping for both schemes, or None when no proxy is configured
        """
        if not self.proxy:
            return None
        proxy_url = self.proxy
        if self.proxy_username:
            parts = urlsplit(proxy_url)
            userinfo = quote(self.proxy_username, safe="")
            if self.proxy_password:
                userinfo += ":" + quote(self.proxy_password, safe="")
            proxy_url = urlunsplit(
                (parts.scheme, f"{userinfo}@{parts.netloc}", parts.path, parts.query, parts.fragment)
            )
        return {"http": proxy_url, "https": proxy_url}


class ConnectionConfig(BaseModel):
    """Session-scoped endpoints and tokens needed to address the service."""

    model_config = ConfigDict(populate_by_name=True)

    storage_url: Optional[str] = Field(None, description="Storage endpoint URL")
    storage_token: Optional[str] = Field(None, description="Token for storage requests")
    auth_token: Optional[str] = Field(None, description="Token for CDN management requests")
    cdn_management_url: Optional[str] = Field(None, description="CDN management endpoint URL")
    credentials: UserCredentials = Field(
        default_factory=UserCredentials, description="User credentials"
    )
    timeout: float = Field(30, description="Request timeout in seconds")

    @field_validator("storage_url", "cdn_management_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.rstrip("/") or None

    def _require(self, *fields: str) -> None:
        missing: List[str] = [name for name in fields if not getattr(self, name)]
        if missing:
            raise InvalidArgumentError(
                f"Connection is not configured: missing {', '.join(missing)}"
            )

    def validate_for_storage(self) -> None:
        """Ensure storage requests can be addressed.

        Raises:
            InvalidArgumentError: If storage_url or storage_token is unset
        """
        self._require("storage_url", "storage_token")

    def validate_for_cdn(self) -> None:
        """Ensure CDN management requests can be addressed.

        Raises:
            InvalidArgumentError: If cdn_management_url or auth_token is unset
        """
        self._require("cdn_management_url", "auth_token")

    @classmethod
    def from_env(cls, prefix: str = "CLOUDFILES_") -> "ConnectionConfig":
        """Build a configuration from environment variables.

        Args:
            prefix: Variable name prefix

        Returns:
            ConnectionConfig populated from the environment
        """
        timeout = os.getenv(f"{prefix}TIMEOUT")
        return cls(
            storage_url=os.getenv(f"{prefix}STORAGE_URL"),
            storage_token=os.getenv(f"{prefix}STORAGE_TOKEN"),
            auth_token=os.getenv(f"{prefix}AUTH_TOKEN"),
            cdn_management_url=os.getenv(f"{prefix}CDN_MANAGEMENT_URL"),
            credentials=UserCredentials(
                username=os.getenv(f"{prefix}USERNAME"),
                api_key=os.getenv(f"{prefix}API_KEY"),
                proxy=os.getenv(f"{prefix}PROXY"),
            ),
            timeout=float(timeout) if timeout else 30,
        )


class RequestDescriptor(BaseModel):
    """A fully built HTTP request for one storage action."""

    model_config = ConfigDict(populate_by_name=True)

    method: str = Field(..., description="HTTP verb")
    url: str = Field(..., description="Target URL")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: bytes = Field(b"", description="Request body")


class TransportResult(BaseModel):
    """Raw outcome of one HTTP round trip."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: bytes = Field(b"", description="Response body")

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Look up a response header case-insensitively."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


class StorageObject(BaseModel):
    """A named object stored in a container."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Object name within its container")
    meta_tags: Dict[str, str] = Field(default_factory=dict, description="Metadata tags")
    public_url: Optional[str] = Field(
        None, description="Container public URL at creation time"
    )
