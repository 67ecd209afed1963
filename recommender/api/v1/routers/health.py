# recommender/api/v1/routers/health.py
import time
import subprocess
import logging
from fastapi import APIRouter
from recommender.core.config import get_settings
from recommender.db.catalog import get_catalog
from recommender.db.redis import get_redis  # returns Redis instance or None

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
async def health():
    """
    Tolerant health check:
    - exposes basic app info and the ranking configuration
    - Redis is 'skipped' when not configured
    - demo catalog size (0 when disabled)
    """
    settings = get_settings()
    version = settings.GIT_SHA if settings.GIT_SHA != "unknown" else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": version,
        "uptime_seconds": int(time.time() - START_TIME),
        "minimum_utility": settings.MINIMUM_UTILITY,
        "result_limit": settings.RESULT_LIMIT,
        "demo_catalog_products": len(get_catalog()),
    }

    # --- Redis (tolerant) ---
    try:
        r = get_redis()
        if r:
            await r.ping()
            checks["redis"] = "ok"
        else:
            checks["redis"] = "skipped"
    except Exception as e:
        logger.warning("health redis ping failed err=%s", e)
        checks["redis"] = f"error: {e}"

    status = "ok" if checks["redis"] in ("ok", "skipped") else "error"

    return {"status": status, "checks": checks, "timestamp": int(time.time())}
