from functools import lru_cache
import os

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config_models import DatabaseConfig, LoggingConfig, PaginationConfig, ServerConfig


class Settings(BaseSettings):
    """Application settings assembled from environment variables and defaults."""

    # Environment
    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    debug: bool = Field(default=False)

    # API
    api_title: str = Field(default="Post API")
    api_version: str = Field(default="1.0.0")
    api_description: str = Field(default="CRUD endpoints for posts and their hash-tags")

    # Server
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Post listing
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)

    # Database (populated in validator)
    database: DatabaseConfig | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **values):
        # Ensure plain ValueError is raised (not Pydantic ValidationError)
        if not os.getenv("DATABASE_URL"):
            raise ValueError("DATABASE_URL environment variable is required")
        super().__init__(**values)

    @model_validator(mode="after")
    def _assemble_subconfigs(self):
        """Assemble nested configurations from environment variables."""
        database_url = os.environ["DATABASE_URL"]

        pool_size = int(os.getenv("DB_POOL_SIZE", "10"))
        max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "20"))
        pool_timeout = int(os.getenv("DB_POOL_TIMEOUT", "30"))
        echo = self.environment == "development" and self.debug

        self.database = DatabaseConfig(
            url=database_url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
        )

        self.pagination = PaginationConfig(
            default_size=int(os.getenv("POSTS_PAGE_SIZE", str(self.pagination.default_size))),
            max_size=int(os.getenv("POSTS_MAX_PAGE_SIZE", str(self.pagination.max_size))),
            page_window=int(os.getenv("POSTS_PAGE_WINDOW", str(self.pagination.page_window))),
            max_page=int(os.getenv("POSTS_MAX_PAGE", str(self.pagination.max_page))),
        )

        # Adjust logging for environment
        if self.environment == "production":
            self.logging.level = "WARNING"
        elif self.environment == "development":
            self.logging.level = "DEBUG"

        check_flag = os.getenv("DB_CHECK_ON_START")
        if isinstance(check_flag, str):
            self.server.check_db_on_start = check_flag.strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

        return self


@lru_cache
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
