from functools import lru_cache
from typing import Literal, Optional
import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "EnnvasRecommender"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Ranking (operator-configured, required)
    MINIMUM_UTILITY: int = Field(ge=0)   # products below this utility are dropped
    RESULT_LIMIT: int = Field(ge=0)      # first K ranked products returned

    # Redis (optional result cache)
    REDIS_URL: Optional[str] = None
    rank_cache_ttl: int = 5 * 60         # 5 minutes

    # Demo catalog (optional JSON array of products)
    DEMO_CATALOG_PATH: Optional[str] = None

    # API
    api_prefix: str = "/ennvas/rcm/rest"

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
