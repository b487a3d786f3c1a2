import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from urlgen.config import settings
from urlgen.logging_config import setup_logging
from urlgen.database.connection import engine, Base
from urlgen.api.v1 import urls, redirect
from urlgen.cache.factory import CacheFactory
from urlgen.dependencies import get_cache

# Import models to ensure they're registered with Base
from urlgen.models import URL

setup_logging()
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_cache()
    yield
    # Stop the cache sweeper thread
    CacheFactory.clear_instance()
    get_cache.cache_clear()
    logger.info("Cache closed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener service with an in-process expiring cache",
    debug=settings.debug,
    lifespan=lifespan
)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(urls.router, prefix="/api/v1")
app.include_router(redirect.router)
