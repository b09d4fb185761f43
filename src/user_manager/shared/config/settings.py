"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from user_manager.infrastructure.api.base import ApiConfig


class ApiSettings(BaseSettings):
    """User service API settings."""
    model_config = SettingsConfigDict(env_prefix="API_")

    base_url: str = "https://dummyapi.io/data/v1/"
    app_id: SecretStr | None = None
    api_key_header: str = "app-id"
    connect_timeout: float = 30.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    page_limit: int = 20


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_enabled: bool = False
    file_path: str = "./logs/user_manager.log"
    console_enabled: bool = True
    console_colored: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "User-Manager"
    app_version: str = "1.0.0"
    debug: bool = False

    # Sub-settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def get_api_config(self) -> ApiConfig:
        """Build the HTTP client configuration."""
        return ApiConfig(
            base_url=self.api.base_url,
            app_id=self.api.app_id.get_secret_value() if self.api.app_id else None,
            api_key_header=self.api.api_key_header,
            connect_timeout=self.api.connect_timeout,
            read_timeout=self.api.read_timeout,
            write_timeout=self.api.write_timeout,
            page_limit=self.api.page_limit,
        )

    def describe(self) -> dict[str, Any]:
        """Get the configuration as a flat dictionary with secrets masked."""
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "debug": self.debug,
            "api.base_url": self.api.base_url,
            "api.app_id": "********" if self.api.app_id else None,
            "api.api_key_header": self.api.api_key_header,
            "api.connect_timeout": self.api.connect_timeout,
            "api.read_timeout": self.api.read_timeout,
            "api.write_timeout": self.api.write_timeout,
            "api.page_limit": self.api.page_limit,
            "logging.level": self.logging.level,
            "logging.file_enabled": self.logging.file_enabled,
            "logging.file_path": self.logging.file_path,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
