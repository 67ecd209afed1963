import logging
import time
from typing import Iterable, List

from recommender.domain.models.product import Product, Query
from recommender.domain.services.utility_svc import score

logger = logging.getLogger(__name__)


def rank(products: Iterable[Product], query: Query, minimum_utility: int, limit: int) -> List[Product]:
    """
    Rank a catalog against a query.

    High-level flow:
      1) Score every product in input order and attach the utility to a copy.
      2) Keep products whose utility is >= minimum_utility
         (with minimum_utility >= 0 this also drops every disqualified product).
      3) Sort by utility descending. Python's sort is stable, so products with
         equal utility keep their input order.
      4) Truncate to the first `limit` products.

    The caller's Product objects are never mutated.
    """
    t0 = time.perf_counter()
    scored = [p.with_utility(score(p, query)) for p in products]
    survivors = [p for p in scored if p.utility >= minimum_utility]
    survivors.sort(key=lambda p: p.utility, reverse=True)
    result = survivors[:limit]

    logger.info(
        "rank done scored=%s survivors=%s returned=%s minimum_utility=%s limit=%s time=%.4fs",
        len(scored), len(survivors), len(result), minimum_utility, limit, time.perf_counter() - t0,
    )
    return result
