"""Configuration management module.

Loads optional user settings from ~/.azfootprint/config.toml. The file only
selects the credential source; it never holds secrets.

Example config:
    auth_method = "service_principal"
    tenant_id = "00000000-0000-0000-0000-000000000000"
    client_id = "00000000-0000-0000-0000-000000000000"
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli

from azfootprint.auth_models import AuthConfig, AuthMethod

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


@dataclass
class AzfootprintConfig:
    """azfootprint configuration data."""

    auth_method: str = AuthMethod.DEFAULT.value
    tenant_id: str | None = None
    client_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AzfootprintConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a known key holds a non-string value
        """
        for key in ("auth_method", "tenant_id", "client_id"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(
                    f"Config key '{key}' must be a string, got {type(value).__name__}"
                )

        return cls(
            auth_method=data.get("auth_method", AuthMethod.DEFAULT.value),
            tenant_id=data.get("tenant_id"),
            client_id=data.get("client_id"),
        )

    def to_auth_config(self, method_override: str | None = None) -> AuthConfig:
        """Build the AuthConfig, letting a CLI flag override the file.

        Raises:
            ConfigError: If the method is unknown or its settings are invalid
        """
        try:
            method = AuthMethod.parse(method_override or self.auth_method)
            return AuthConfig(method=method, tenant_id=self.tenant_id, client_id=self.client_id)
        except ValueError as e:
            raise ConfigError(str(e)) from e


class ConfigManager:
    """Locate and load the azfootprint configuration file."""

    DEFAULT_CONFIG_DIR = Path.home() / ".azfootprint"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If a custom path was given and does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return cls.DEFAULT_CONFIG_FILE

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> AzfootprintConfig:
        """Load configuration from file.

        A missing default file is not an error; defaults are returned.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return AzfootprintConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)
        except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")
        return AzfootprintConfig.from_dict(data)
