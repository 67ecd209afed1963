import logging
import re
from typing import List, Optional

from recommender.domain.models.product import Product, Query
from recommender.domain.services.constants import DISQUALIFIED, MATCH_POINT, TEXT_FIELDS, TOKEN_SEPARATOR
from recommender.domain.services.normalizer import to_comparable_form

logger = logging.getLogger(__name__)

# ASCII-only classes: accented letters in a phrase are dropped, not folded
_NOT_ALLOWED = re.compile(r"[^\sA-Za-z0-9]", re.ASCII)
_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


def _disqualified_by(product: Product, query: Query) -> Optional[str]:
    """
    Return the name of the first hard filter the product fails, or None.
    Filters are checked in a fixed order; only the first failure matters.
    """
    if query.price_min is not None and query.price_min > product.price:
        return "price_min"
    if query.price_max is not None and query.price_max < product.price:
        return "price_max"
    if query.free_shipping and not product.is_shipping_free:
        return "free_shipping"
    if query.max_shipping_time is not None and query.max_shipping_time < product.shipping_time:
        return "max_shipping_time"
    if query.available and not product.is_available:
        return "available"
    if query.min_rating is not None and query.min_rating > product.rating:
        return "min_rating"
    return None


def tokenize_phrase(phrase: Optional[str]) -> List[str]:
    """
    Split a free-text phrase into search tokens.
    - Drop everything but ASCII whitespace, letters and digits.
    - Collapse whitespace runs into one separator and split on it.
    - Trailing empty tokens are dropped; a leading one is kept.
    - An empty or blank phrase yields exactly one empty token.
    """
    cleaned = _NOT_ALLOWED.sub("", phrase or "")
    tokens = _WHITESPACE_RUN.sub(TOKEN_SEPARATOR, cleaned).split(TOKEN_SEPARATOR)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens or [""]


def text_relevance(product: Product, phrase: Optional[str]) -> float:
    """
    +1 per (token, field) pair where the normalized token is a substring of
    the normalized field. No deduplication. A null field never matches.
    """
    fields = [to_comparable_form(getattr(product, f)) for f in TEXT_FIELDS]
    utility = 0.0
    for token in tokenize_phrase(phrase):
        needle = to_comparable_form(token)
        for field in fields:
            if field is not None and needle in field:
                utility += MATCH_POINT
    return utility


def score(product: Product, query: Query) -> float:
    """
    Utility of one product for one query.
    Returns DISQUALIFIED (-1) when any hard filter fails, otherwise the
    cumulative text-match relevance (>= 0).
    """
    failed = _disqualified_by(product, query)
    if failed:
        logger.debug("product name=%r disqualified by filter=%s", product.name, failed)
        return DISQUALIFIED
    return text_relevance(product, query.phrase)
