"""
FastAPI Application - Signal Intelligence Core API
"""
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings, ensure_directories
from database import init_engine, close_engine
from database.init import run_migrations
from utils import logger, init_logging
from .routes import router

init_logging(app_name="api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting API server")
    ensure_directories()

    if settings.RUN_MIGRATIONS_ON_STARTUP:
        # Alembic's env runs its own event loop, so keep it off this one
        await asyncio.to_thread(run_migrations)

    await init_engine()
    yield
    logger.info("Shutting down API server")
    await close_engine()


app = FastAPI(
    title="Signal Intelligence Core",
    description="Priority scoring, pattern shift detection and adaptive thresholds for sentiment signals",
    version="1.0.0",
    lifespan=lifespan
)

# Server-side analysis endpoint: any origin may call it
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Signal Intelligence Core",
        "version": "1.0.0",
        "status": "running"
    }


def main():
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
