# recommender/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from recommender.db import catalog, redis as r

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    # Redis is optional: connect() only warns when it is missing or down
    await r.connect()

    # Demo catalog is optional: a bad file leaves it empty
    catalog.connect()

    logger.info("Recommender started")

    # Application runs
    yield

    # --- Shutdown ---
    try:
        await r.disconnect()
    except Exception as e:
        logger.warning("Redis disconnect failed (ignored): %s", e)

    catalog.disconnect()
    logger.info("Recommender stopped")
