"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_LOCAL = "local"
ENV_AWS = "aws"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        env: Backend mode. "local" targets DynamoDB Local, "aws" the managed service.
        aws_region: Region used when env is "aws".
        dynamo_table: Name of the users table.
        dynamo_local_endpoint: Endpoint of DynamoDB Local.
        dynamo_connect_timeout: Seconds to wait for a connection to DynamoDB.
        dynamo_read_timeout: Seconds to wait for a DynamoDB response.
        create_table_on_startup: Create the users table when the app starts.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        shutdown_grace_seconds: Time allowed for in-flight requests on shutdown.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Dynamo Users"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "120/minute"

    env: str = ENV_LOCAL
    aws_region: str = "us-east-1"
    dynamo_table: str = "Users"
    dynamo_local_endpoint: str = "http://localhost:8000"
    dynamo_connect_timeout: float = 5.0
    dynamo_read_timeout: float = 10.0
    create_table_on_startup: bool = True

    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_grace_seconds: int = 10

    @property
    def is_local(self) -> bool:
        """Return True unless the managed AWS endpoint was requested."""
        return self.env.strip().lower() != ENV_AWS


settings = Settings()
