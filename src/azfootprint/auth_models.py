"""Authentication data models for azfootprint.

Defines the credential sources the CLI can use and the configuration needed
to build each of them.

Security features:
- Frozen dataclass for immutability
- UUID validation in __post_init__
- No client secret storage (environment only)
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any
from uuid import UUID


def validate_uuid(value: str, field_name: str) -> None:
    """Validate UUID format. Raises ValueError if invalid."""
    if not value:
        raise ValueError(f"{field_name} must be valid UUID format, got empty string")

    try:
        UUID(value)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"{field_name} must be valid UUID format, got: {value}") from e


class AuthMethod(StrEnum):
    """Credential source enumeration.

    - DEFAULT: Ambient discovery via DefaultAzureCredential (env vars,
      managed identity, Azure CLI login, ...)
    - AZURE_CLI: Delegate to the Azure CLI login only
    - MANAGED_IDENTITY: System or user-assigned managed identity
    - SERVICE_PRINCIPAL: Client secret from AZURE_CLIENT_SECRET
    """

    DEFAULT = "default"
    AZURE_CLI = "az_cli"
    MANAGED_IDENTITY = "managed_identity"
    SERVICE_PRINCIPAL = "service_principal"

    @classmethod
    def parse(cls, value: str) -> "AuthMethod":
        """Parse a config/CLI value, raising ValueError on unknown methods."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown auth method '{value}'. Valid methods: {valid}") from e


@dataclass(frozen=True)
class AuthConfig:
    """Credential configuration.

    tenant_id and client_id are only meaningful for SERVICE_PRINCIPAL
    (both required) and MANAGED_IDENTITY (client_id selects a
    user-assigned identity).
    """

    method: AuthMethod = AuthMethod.DEFAULT
    tenant_id: str | None = None
    client_id: str | None = None

    def __post_init__(self):
        if self.method == AuthMethod.SERVICE_PRINCIPAL:
            validate_uuid(self.tenant_id or "", "tenant_id")
            validate_uuid(self.client_id or "", "client_id")
        elif self.client_id:
            validate_uuid(self.client_id, "client_id")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data: dict[str, Any] = {"auth_method": self.method.value}
        if self.tenant_id:
            data["tenant_id"] = self.tenant_id
        if self.client_id:
            data["client_id"] = self.client_id
        return data
