"""
Configuration management for gqlcache
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Store layout
    root_query_id: str = "ROOT_QUERY"

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GQLCACHE_"
        case_sensitive = False


# Global settings instance
settings = Settings()
