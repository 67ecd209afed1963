# recommender/api/v1/routers/process.py
from fastapi import APIRouter, Depends, HTTPException
import time
import logging

from recommender.api.deps import catalog_dep, redis_dep, settings_dep
from recommender.api.v1.schemas.reco import ProductListOut, QueryIn, RcmRequest
from recommender.core.config import Settings
from recommender.domain.services.rank_request_svc import rank_products_svc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["process"])


@router.post("/process", response_model=ProductListOut, response_model_exclude_none=True)
async def process(
    request: RcmRequest,
    settings: Settings = Depends(settings_dep),
    redis = Depends(redis_dep),
):
    """
    Rank the supplied products against the query.
    Uses the operator-configured MINIMUM_UTILITY and RESULT_LIMIT.
    """
    logger.info(
        "Request: process products=%s phrase=%r minimum_utility=%s limit=%s",
        len(request.products), request.query.phrase, settings.MINIMUM_UTILITY, settings.RESULT_LIMIT,
    )
    start_time = time.perf_counter()

    res = await rank_products_svc(
        redis,
        request.query.to_domain(),
        [p.to_domain() for p in request.products],
        settings.MINIMUM_UTILITY,
        settings.RESULT_LIMIT,
    )

    logger.info(
        "Response: process count=%s elapsed_time=%.4fs",
        len(res["products"]), time.perf_counter() - start_time,
    )
    return res


@router.post("/catalog/process", response_model=ProductListOut, response_model_exclude_none=True)
async def process_catalog(
    query: QueryIn,
    settings: Settings = Depends(settings_dep),
    catalog = Depends(catalog_dep),
    redis = Depends(redis_dep),
):
    """
    Rank the demo catalog loaded at startup (DEMO_CATALOG_PATH) against the query.
    """
    if not catalog:
        raise HTTPException(status_code=503, detail="Demo catalog not loaded")

    logger.info("Request: process_catalog catalog=%s phrase=%r", len(catalog), query.phrase)
    start_time = time.perf_counter()

    res = await rank_products_svc(redis, query.to_domain(), catalog, settings.MINIMUM_UTILITY, settings.RESULT_LIMIT)

    logger.info(
        "Response: process_catalog count=%s elapsed_time=%.4fs",
        len(res["products"]), time.perf_counter() - start_time,
    )
    return res
