import uvicorn

from app import create_app
from core.config import settings

app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured server settings."""
    uvicorn.run(
        "main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
        access_log=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
