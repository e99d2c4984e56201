"""Application configuration using Pydantic settings."""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env file into os.environ before settings are read
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./catalog.db"

    # Product images are stored as base64 text; the limit applies to raw bytes
    max_image_size_bytes: int = 10 * 1024 * 1024

    # Populate the demo catalog when the app starts (no-op if data exists)
    seed_on_startup: bool = False

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def max_image_size_mb(self) -> float:
        """Image size limit in megabytes, for error messages."""
        return self.max_image_size_bytes / (1024 * 1024)


settings = Settings()
