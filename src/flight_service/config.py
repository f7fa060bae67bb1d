"""
Configuration management for flight service
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Server configuration"""
    model_config = SettingsConfigDict(env_prefix="SERVER_")

    port: int = Field(default=8000)
    host: str = Field(default="0.0.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)


class DatabaseConfig(BaseSettings):
    """Flight/booking store configuration"""
    model_config = SettingsConfigDict(env_prefix="DATABASE_")

    url: str = Field(default="sqlite+aiosqlite:///./flights.db")
    echo: bool = Field(default=False)
    seed_demo_data: bool = Field(default=True)


class ClassificationConfig(BaseSettings):
    """Inbound classification signal configuration"""
    model_config = SettingsConfigDict(env_prefix="CLASSIFICATION_")

    confidence_header: str = Field(default="X-Bot-Confidence")
    agent_type_header: str = Field(default="X-User-Agent-Type")


class LoggingConfig(BaseSettings):
    """Logging configuration"""
    model_config = SettingsConfigDict(env_prefix="LOGGING_")

    level: str = Field(default="INFO")
    enable_audit: bool = Field(default=True)
    log_format: str = Field(default="json")  # json or text


class Config:
    """Main configuration class"""

    def __init__(self):
        self.server = ServerConfig()
        self.database = DatabaseConfig()
        self.classification = ClassificationConfig()
        self.logging = LoggingConfig()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.server.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.server.environment.lower() == "production"


# Global configuration instance
config = Config()
