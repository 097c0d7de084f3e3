# The module is to define the configuration settings for the application.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal, Optional

SERVER_NAME = "exa-search-server"
SERVER_VERSION = "0.3.10"

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the application.
    It inherits from BaseSettings, which loads values from the environment and
    an optional .env file and provides type validation for them.
    Attributes:
        EXA_API_KEY (str): API key for Exa. Only required when serving tools.
        EXA_API_BASE_URL (str): Base URL of the Exa API.
        EXA_REQUEST_TIMEOUT (float): Timeout in seconds for a single Exa request.
        HOST (str): Interface the streamable HTTP transport listens on.
        PORT (int): Port the streamable HTTP transport listens on.
        MCP_TRANSPORT (str): 'auto' tries HTTP then stdio, 'http' or 'stdio' force one.
        LOG_LEVEL (str): Logging level for the diagnostic stream.
    """
    # EXA
    EXA_API_KEY: Optional[str] = None
    EXA_API_BASE_URL: str = "https://api.exa.ai"
    EXA_REQUEST_TIMEOUT: float = 25.0

    # TRANSPORT
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    MCP_TRANSPORT: Literal["auto", "http", "stdio"] = "auto"

    # LOGGING
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()
