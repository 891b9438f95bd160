"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Processing limits
    max_email_size_mb: int = 25
    max_attachments: int = 50
    max_nesting_depth: int = 32  # Deeper multipart subtrees are skipped
    read_chunk_size: int = 64 * 1024

    # CLI
    attachments_dir: str = "attachments"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
