"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Aerospike defaults (used when a connect request omits host/port)
    aerospike_host: str = "localhost"
    aerospike_port: int = 3000
    aerospike_timeout_ms: int = 5000

    # Record browsing limits
    scan_max_records: int = 100
    search_max_results: int = 100
    search_scan_multiplier: int = 10  # records scanned per wanted match

    # Redis (connection profiles and UI preferences)
    redis_host: str = "redis"
    redis_port: int = 6379

    # HTTP
    cors_origins: list[str] = [
        "http://localhost:8501",  # Streamlit default
        "http://streamlit_frontend:8501",  # Docker network
        "http://localhost:3000",  # Development
    ]

    log_level: str = "info"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
