# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Runtime environment ("development" exposes error details in 500 responses)
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "production").lower()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/Sao_Paulo")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "taskia")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )
        # Multi-document transactions need a replica set; standalone servers must leave this off
        self.mongo_transactions_enabled: Final[bool] = os.getenv(
            "MONGO_TRANSACTIONS_ENABLED", "false"
        ).lower() in ("true", "1", "yes")

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.projects_collection: Final[str] = os.getenv("PROJECTS_COLLECTION", "projects")

        # HTTP Configuration
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "/api")
        self.cors_allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def is_development(self) -> bool:
        """Check if the application runs in development mode."""
        return self.environment == "development"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
