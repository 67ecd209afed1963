# recommender/db/catalog.py
import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from recommender.api.v1.schemas.reco import ProductIn
from recommender.core.config import get_settings
from recommender.domain.models.product import Product

logger = logging.getLogger(__name__)

_catalog: List[Product] = []
_products_adapter = TypeAdapter(List[ProductIn])


def load_catalog_file(path: str | Path) -> List[Product]:
    """
    Read a JSON array of products and validate it with the same wire schema
    as /process (camelCase aliases, non-negative price/stock/shipping).
    Raises OSError / ValueError / ValidationError on unreadable or invalid files.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return [p.to_domain() for p in _products_adapter.validate_python(json.loads(raw))]


def connect():
    """
    Load the demo catalog from DEMO_CATALOG_PATH, if configured.
    A bad file is logged and leaves the catalog empty; startup continues.
    """
    global _catalog
    settings = get_settings()
    if not settings.DEMO_CATALOG_PATH:
        logger.info("No DEMO_CATALOG_PATH configured, demo catalog disabled")
        _catalog = []
        return

    try:
        _catalog = load_catalog_file(settings.DEMO_CATALOG_PATH)
        logger.info("Demo catalog loaded path=%s products=%s", settings.DEMO_CATALOG_PATH, len(_catalog))
    except (OSError, ValueError, ValidationError) as e:
        logger.error("Demo catalog load failed path=%s err=%s", settings.DEMO_CATALOG_PATH, e)
        _catalog = []


def disconnect():
    global _catalog
    _catalog = []


def get_catalog() -> List[Product]:
    return _catalog
