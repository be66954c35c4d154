import uvicorn
from fastapi import FastAPI

from app.api.http_api import create_app
from app.config.settings import Settings
from app.logging.logger import Log


def build_app() -> FastAPI:
    """ASGI factory: load settings -> configure logging -> build the app.

    Usable as `uvicorn app.main:build_app --factory`.
    """
    settings = Settings()
    Log.configure(settings.log_level)
    return create_app(settings)


def main() -> None:
    """Entry point: serve the API on the configured host and port."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
