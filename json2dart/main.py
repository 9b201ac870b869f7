import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from json2dart.core.config import settings
from json2dart.core.logging import configure_logging
from json2dart.api.routes import router as api_router

configure_logging()
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    log.info("Starting API server (settings file: %s)", settings.settings_path)
    yield
    log.info("Shutting down API server...")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan
)
app.include_router(api_router, prefix="/v1")
