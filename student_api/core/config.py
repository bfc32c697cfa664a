from urllib.parse import urlsplit, urlunsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # =============================================================================
    # MONGODB
    # =============================================================================
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "school"
    MONGODB_COLLECTION: str = "students"

    # How long the driver waits for a reachable server before failing a call
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("PORT")
    @classmethod
    def check_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    def get_masked_mongodb_url(self) -> str:
        """MongoDB URL with the password (if any) replaced by ***."""
        parts = urlsplit(self.MONGODB_URL)
        if parts.password is None:
            return self.MONGODB_URL
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()


# Helper function to display current config (for debugging)
def print_config():
    """Print current configuration (hide sensitive data)."""
    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {settings.PROJECT_NAME}")
    print(f"Version: {settings.APP_VERSION}")
    print(f"Debug Mode: {settings.DEBUG}")
    print(f"Listen: {settings.HOST}:{settings.PORT}")
    print("-" * 80)
    print(f"MongoDB URL: {settings.get_masked_mongodb_url()}")
    print(f"Database: {settings.MONGODB_DB}")
    print(f"Collection: {settings.MONGODB_COLLECTION}")
    print(f"Server Selection Timeout (ms): {settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS}")
    print("-" * 80)
    print(f"Log Level: {settings.LOG_LEVEL}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
