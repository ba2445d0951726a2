"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portal_server import __version__
from portal_server.api import episodes_router, stats_router
from portal_server.api.deps import DbSessionDep, init_services
from portal_server.core.config import settings
from portal_server.database import dispose_db, init_db
from portal_server.services.episode_catalog import EpisodeCatalog
from portal_server.web.views import STATIC_DIR
from portal_server.web.views import router as views_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Service instances
episode_catalog = EpisodeCatalog(season=settings.season)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting Portal Links Server v{__version__}")

    # Initialize database
    logger.info("Initializing database...")
    await init_db()
    inserted = await episode_catalog.seed()
    if inserted:
        logger.info("Default episodes inserted")

    init_services(episode_catalog)

    logger.info(f"Server ready on {settings.host}:{settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await dispose_db()


app = FastAPI(
    title="Portal Links Server",
    description="Episode catalog with crowd-submitted streaming links",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log store failures and answer with an opaque 500."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Include routers
app.include_router(episodes_router)
app.include_router(stats_router)
app.include_router(views_router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/health")
async def health(db: DbSessionDep) -> dict:
    """Health check endpoint."""
    await db.execute(text("SELECT 1"))
    return {
        "status": "healthy",
        "version": __version__,
        "season": settings.season,
        "database": "ok",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portal_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
