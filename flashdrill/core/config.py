from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from pathlib import Path
import logging
import os

_logger = logging.getLogger(__name__)

# Look for .env in the project root (parent of the flashdrill package)
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./flashdrill.db"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # "development", "dev" or "local" expose tracebacks in 500 responses
    environment: str = "production"

    log_level: str = "INFO"

    # Header the upstream identity provider uses to forward the authenticated user id
    identity_header: str = "X-User-Id"

    # Idle review sessions older than this are dropped from memory
    review_session_ttl_minutes: int = 120

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Some hosts only provide DATABASE_URL in uppercase
        if not kwargs.get("database_url") and os.getenv("DATABASE_URL") is not None:
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()

if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable must not be empty")
