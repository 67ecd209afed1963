from fastapi import FastAPI
from recommender.core.config import get_settings
from recommender.core.lifespan import lifespan
from recommender.api.v1.routers.health import router as health_router
from recommender.api.v1.routers.process import router as process_router
from recommender.core.logging import configure_logging

import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- Routes -------
app.include_router(health_router)
app.include_router(process_router, prefix=settings.api_prefix)   # /ennvas/rcm/rest/process
