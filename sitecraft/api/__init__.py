"""HTTP surface for the context engine."""

from fastapi import FastAPI

from sitecraft.api.context_routes import router as context_router
from sitecraft.core.logger import setup_logging


def create_app(configure_logging: bool = True) -> FastAPI:
    """Build the FastAPI app with the context routes mounted."""
    if configure_logging:
        setup_logging()

    app = FastAPI(title="Sitecraft Context Engine")
    app.include_router(context_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


__all__ = ["create_app", "context_router"]
