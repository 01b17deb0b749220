from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Pitico"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database (created on startup if absent)
    database_url: str = "sqlite:///./pitico.db"
    
    # URL shortener specific
    base_url: str = "http://127.0.0.1:8000"
    redirect_scheme: str = "http"  # Prefixed to every stored URL on redirect
    registration_max_retries: int = 5
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
