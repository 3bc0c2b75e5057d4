"""Credential factory for Azure authentication.

Creates Azure Identity SDK credential objects from AuthConfig. The default
is ambient discovery through DefaultAzureCredential, which tries environment
variables, workload/managed identity and the Azure CLI login in turn.

Supported credential types:
- DefaultAzureCredential: Ambient discovery (default)
- AzureCliCredential: Delegate to Azure CLI
- ManagedIdentityCredential: Managed identity (system or user-assigned)
- ClientSecretCredential: Service principal with client secret

Security:
- No token storage - delegates to Azure Identity SDK
- Client secrets from environment variables only
"""

import logging
import os
from typing import Any

from azure.identity import (
    AzureCliCredential,
    ClientSecretCredential,
    DefaultAzureCredential,
    ManagedIdentityCredential,
)

from azfootprint.auth_models import AuthConfig, AuthMethod

logger = logging.getLogger(__name__)


class CredentialFactoryError(Exception):
    """Raised when credential creation fails."""

    pass


class CredentialFactory:
    """Factory for creating Azure Identity credentials.

    Credential construction is lazy in the Azure SDK: most discovery
    failures only surface on the first token request, which happens inside
    the first management API call.
    """

    @staticmethod
    def create_credential(auth_config: AuthConfig | None = None) -> Any:
        """Create Azure Identity credential from configuration.

        Args:
            auth_config: Authentication configuration (defaults to ambient discovery)

        Returns:
            Azure Identity credential object (TokenCredential)

        Raises:
            CredentialFactoryError: If credential creation fails
        """
        auth_config = auth_config or AuthConfig()
        logger.debug(f"Creating credential for auth method: {auth_config.method}")

        if auth_config.method == AuthMethod.DEFAULT:
            return CredentialFactory._build(DefaultAzureCredential, "default Azure credential")

        if auth_config.method == AuthMethod.AZURE_CLI:
            return CredentialFactory._build(
                AzureCliCredential,
                "Azure CLI credential. Is Azure CLI installed and authenticated?",
            )

        if auth_config.method == AuthMethod.MANAGED_IDENTITY:
            if auth_config.client_id:
                return CredentialFactory._build(
                    ManagedIdentityCredential,
                    "managed identity credential",
                    client_id=auth_config.client_id,
                )
            return CredentialFactory._build(
                ManagedIdentityCredential, "managed identity credential"
            )

        if auth_config.method == AuthMethod.SERVICE_PRINCIPAL:
            return CredentialFactory._create_sp_secret_credential(auth_config)

        raise CredentialFactoryError(f"Unsupported authentication method: {auth_config.method}")

    @staticmethod
    def _create_sp_secret_credential(auth_config: AuthConfig) -> ClientSecretCredential:
        """Create service principal credential with client secret.

        The secret MUST come from the AZURE_CLIENT_SECRET environment variable.

        Raises:
            CredentialFactoryError: If client secret not found in environment
        """
        client_secret = os.getenv("AZURE_CLIENT_SECRET")
        if not client_secret:
            raise CredentialFactoryError(
                "Client secret not found in environment. "
                "Set AZURE_CLIENT_SECRET environment variable."
            )

        return CredentialFactory._build(
            ClientSecretCredential,
            "service principal credential",
            tenant_id=auth_config.tenant_id,
            client_id=auth_config.client_id,
            client_secret=client_secret,
        )

    @staticmethod
    def _build(credential_cls: Any, description: str, **kwargs: Any) -> Any:
        try:
            return credential_cls(**kwargs)
        except Exception as e:
            # Exception text may contain the client secret
            raise CredentialFactoryError(
                f"Failed to create {description} ({type(e).__name__})"
            ) from e
