from pydantic import BaseModel, Field, model_validator


class DatabaseConfig(BaseModel):
    """Database connection and engine configuration."""

    url: str = Field(..., description="Database connection URL")
    echo: bool = Field(default=False, description="Enable SQL query logging")
    pool_size: int = Field(default=10, ge=1, le=100)
    max_overflow: int = Field(default=20, ge=0, le=100)
    pool_timeout: int = Field(default=30, ge=1, le=300)
    pool_pre_ping: bool = Field(default=True)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class ServerConfig(BaseModel):
    """Server runtime configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload in development")
    check_db_on_start: bool = Field(
        default=True, description="Run DB connection check on startup"
    )


class LoggingConfig(BaseModel):
    """Application logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


class PaginationConfig(BaseModel):
    """Defaults applied to post list queries."""

    default_size: int = Field(default=10, ge=1, description="Page size used when none is given")
    max_size: int = Field(default=100, ge=1, description="Upper bound for the page size")
    page_window: int = Field(default=5, ge=1, description="Number of page links in one window")
    max_page: int = Field(default=1_000_000, ge=1, description="Highest page number served; larger pages are clamped")

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.default_size > self.max_size:
            raise ValueError("default_size must not exceed max_size")
        return self
