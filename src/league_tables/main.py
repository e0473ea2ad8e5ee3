import logging

from fastapi import FastAPI

from league_tables.core.config import get_settings
from league_tables.core.logging import setup_logging
from league_tables.routes.api_v1 import api_v1_router

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.include_router(api_v1_router)


@app.on_event("startup")
async def on_startup() -> None:
    """Application startup hook."""
    logger.info("Application startup complete (standings_dir=%s)", settings.standings_dir)


@app.get("/health")
async def health() -> dict:
    """Simple health check endpoint."""
    return {"status": "ok"}
