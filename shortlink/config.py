"""Configuration management for URL shortener."""

import os
from typing import Literal, Optional, Tuple, Type

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


CONFIG_PATH_ENV = "CONFIG_PATH"


class HTTPServerConfig(BaseModel):
    """HTTP server settings."""

    address: str = Field(
        default="0.0.0.0:8080",
        description="host:port to listen on"
    )

    idle_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Seconds to keep idle keep-alive connections open"
    )

    shutdown_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for in-flight requests on shutdown"
    )

    user: str = Field(
        ...,
        description="Basic auth user for the save endpoint"
    )

    password: SecretStr = Field(
        ...,
        description="Basic auth password for the save endpoint"
    )

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Require host:port with a port in 1-65535."""
        _, sep, port = v.rpartition(":")
        if not sep or not port.isdigit() or not 0 < int(port) <= 65535:
            raise ValueError(f"address must be host:port, got {v!r}")
        return v

    @property
    def host(self) -> str:
        host, _, _ = self.address.rpartition(":")
        return host or "0.0.0.0"

    @property
    def port(self) -> int:
        _, _, port = self.address.rpartition(":")
        return int(port)


class Config(BaseSettings):
    """Application configuration.

    Values come from (highest priority first) keyword arguments, environment
    variables, a .env file and the YAML file named by CONFIG_PATH.
    """

    env: Literal["local", "qa", "prod"] = Field(
        default="local",
        description="Deployment environment; selects log level and format"
    )

    storage_path: str = Field(
        ...,
        description="Path to the SQLite database file"
    )

    http_server: HTTPServerConfig

    # URL shortener settings
    alias_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated aliases"
    )

    max_collision_retries: int = Field(
        default=3,
        ge=0,
        description="Extra attempts when a generated alias is already taken"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout only if not specified)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=os.getenv(CONFIG_PATH_ENV) or None,
        )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )


def load_config() -> Config:
    """Load configuration from CONFIG_PATH and the environment.

    Raises:
        FileNotFoundError: If CONFIG_PATH is set but the file does not exist
    """
    config_path = os.getenv(CONFIG_PATH_ENV)
    if config_path and not os.path.isfile(config_path):
        raise FileNotFoundError(f"config file does not exist: {config_path}")
    return Config()
