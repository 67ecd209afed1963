# recommender/api/deps.py
from recommender.core.config import Settings, get_settings
from recommender.db.catalog import get_catalog
from recommender.db.redis import get_redis

# Dependency for injecting the optional Redis result cache into endpoints
def redis_dep():
    return get_redis()

# Dependency for injecting the in-memory demo catalog into endpoints
def catalog_dep():
    return get_catalog()

# Dependency for the operator ranking configuration
def settings_dep() -> Settings:
    return get_settings()
