from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import os


class Settings(BaseSettings):
    """
    Settings class to store the configuration settings for the application
    """
    PROJECT_NAME: str = Field("User Insert Service", description="Name of the project")
    VERSION: str = Field("1.0.0", description="Version of the project")
    API_V1_STR: str = Field("/api/v1", description="API version")
    DESCRIPTION: str = Field("Creates users through the insert_user database function",
                             description="Project description")
    DB_STR: str = Field(..., description="Async database connection string")
    DB_POOL_SIZE: int = Field(5, ge=1, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(10, ge=0, description="Connections allowed above the pool size")
    DB_POOL_TIMEOUT: int = Field(30, ge=1, description="Seconds to wait for a pooled connection")
    DB_ECHO: bool = Field(False, description="Log SQL statements, bound parameters are always hidden")
    DB_CALL_TIMEOUT_SECONDS: float = Field(10.0, gt=0, description="Upper bound for one stored function call")
    INSERT_USER_FUNCTION: str = Field("insert_user", pattern=r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$",
                                      description="Stored function (optionally schema qualified) that inserts a user")
    ALLOWED_ORIGINS: str = Field("*", description="Allowed hosts")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    ENV: str = os.getenv('ENV_MODE', 'dev')
    model_config = SettingsConfigDict(env_file=f".env.{ENV}", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
