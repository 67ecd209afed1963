import hashlib
import json
import logging
import time
from typing import Any, Dict, List, Optional

from recommender.core.config import get_settings
from recommender.domain.models.product import Product, Query
from recommender.domain.services.constants import RANK_CACHE_PREFIX
from recommender.domain.services.ranking_svc import rank
from recommender.utils.cache import cache_get, cache_set

logger = logging.getLogger(__name__)


def _json_preview(obj: Any, limit: int = 1000) -> str:
    """Minify and truncate JSON for debug logs."""
    try:
        s = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        return s if len(s) <= limit else s[:limit] + "…[truncated]"
    except (TypeError, ValueError):
        return "<unserializable>"


def rank_cache_key(query: Query, products: List[Dict[str, Any]], minimum_utility: int, limit: int) -> str:
    cache_key_data = {
        "shape": "products_v1",
        "query": query.model_dump(),
        "products": products,
        "minimum_utility": minimum_utility,
        "limit": limit,
    }
    digest = hashlib.md5(json.dumps(cache_key_data, sort_keys=True, default=str).encode()).hexdigest()
    return f"{RANK_CACHE_PREFIX}:{digest}"


async def rank_products_svc(
    redis,
    query: Query,
    products: List[Product],
    minimum_utility: int,
    limit: int,
) -> Dict[str, Any]:
    """
    Rank a catalog for one request and return the {"products": [...]} payload.
    - Expects domain objects: wire sentinels are already translated by the caller.
    - Serves from / writes to the Redis result cache when `redis` is not None.
      Redis failures are logged and the request is served uncached.
    """
    start_time = time.perf_counter()
    settings = get_settings()
    catalog = list(products)
    logger.info("rank_products start products=%s query=%s", len(catalog), _json_preview(query.model_dump()))

    cache_key: Optional[str] = None
    if redis is not None:
        cache_key = rank_cache_key(query, [p.model_dump() for p in catalog], minimum_utility, limit)
        try:
            cached = await cache_get(redis, cache_key)
        except Exception as e:
            logger.warning("rank_products redis.get error key=%s err=%s", cache_key, e)
            cached = None
        if isinstance(cached, dict) and "products" in cached:
            logger.info("rank_products cache_hit key=%s items=%s", cache_key, len(cached["products"]))
            return cached
        logger.info("rank_products cache_miss key=%s", cache_key)

    ranked = rank(catalog, query, minimum_utility, limit)
    for p in ranked:
        logger.debug("ranked utility=%s product=%s", p.utility, _json_preview(p.model_dump()))

    # utility is excluded from Product.model_dump(); null fields are omitted
    result = {"products": [p.model_dump(exclude_none=True) for p in ranked]}

    if cache_key is not None:
        try:
            await cache_set(redis, cache_key, result, ex=settings.rank_cache_ttl)
            logger.debug("rank_products cache_set key=%s ttl=%ds", cache_key, settings.rank_cache_ttl)
        except Exception as e:
            logger.warning("rank_products redis.set error key=%s err=%s", cache_key, e)

    logger.info("rank_products done items=%s total_time=%.3fs", len(ranked), time.perf_counter() - start_time)
    return result
