"""
Configuration management for WiFi Connector.

Uses Pydantic for validated configuration with sensible defaults
for running the credential form on a local machine.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from wificonnector.exceptions import ConfigError

# Default config file location
DEFAULT_CONFIG_PATH = Path("/etc/wificonnector/config.yaml")


class ConnectorConfig(BaseModel):
    """Main configuration for WiFi Connector.

    All settings have sensible defaults. The OpenAI API key falls back
    to the OPENAI_API_KEY environment variable when not set here.
    """

    # Web server
    web_host: str = Field(
        default="0.0.0.0",
        description="Host for web server to bind to",
    )
    web_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for web server",
    )

    # Password suggestion provider
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key (default: OPENAI_API_KEY environment variable)",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat model used to suggest passwords",
    )
    suggestion_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a password suggestion",
    )
    suggestion_temperature: float = Field(
        default=1.0,
        ge=0,
        le=2,
        description="Sampling temperature for password suggestions",
    )

    # Simulated send
    send_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Delay before a simulated send resolves",
    )
    send_success_probability: float = Field(
        default=0.7,
        ge=0,
        le=1,
        description="Probability that a simulated send succeeds",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name",
    )

    model_config = {
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_api_key(self) -> Optional[str]:
        """Get the API key that will actually be used.

        Returns:
            Configured key, or the OPENAI_API_KEY environment variable
        """
        return self.openai_api_key or os.environ.get("OPENAI_API_KEY")


def load_config(config_path: Optional[Path] = None) -> ConnectorConfig:
    """Load configuration from file.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If the file cannot be read, parsed, or holds invalid values
    """
    if config_path and config_path.exists():
        import yaml

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            return ConnectorConfig(**data)
        except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    return ConnectorConfig()


def save_config(config: ConnectorConfig, config_path: Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save
        config_path: Path to write config file
    """
    import yaml

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)
