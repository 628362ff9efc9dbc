import logging

from dotenv import load_dotenv

load_dotenv()

from contextlib import asynccontextmanager
from typing import AsyncIterator
from fastapi import FastAPI

from .db import engine
from .db_init import init_db
from .utils.config import AUTO_CREATE_TABLES, LOG_LEVEL
from .utils.logging_config import setup_logging

from .routers.games import router as games_router
from .routers.reviews import router as reviews_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Configure logging and, unless disabled, create missing tables on startup.
    """
    setup_logging(LOG_LEVEL)

    if AUTO_CREATE_TABLES:
        init_db(engine)
    else:
        logger.info("AUTO_CREATE_TABLES disabled, expecting migrations to have run")

    yield


# Only the API routes are served: no interactive docs or schema endpoints.
app = FastAPI(
    title="GameReviews API",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(games_router)
app.include_router(reviews_router)
