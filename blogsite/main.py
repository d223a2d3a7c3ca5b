import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogsite import __version__
from blogsite.cache import cache
from blogsite.config import settings
from blogsite.routers import admin, blog

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    logger.info("Starting blogsite %s (%s)", __version__, settings.APP_ENV)
    await cache.connect()
    yield
    # Shutdown
    await cache.disconnect()


app = FastAPI(
    title="Blog API",
    description="Read-only blog post queries: published listings, categories and broadcasts",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routers
app.include_router(blog.router)
app.include_router(admin.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__, "cache": cache.stats}
