import json
import logging
from typing import Optional
from carshare.core.redis import get_redis
from carshare.core.config import settings
from carshare.core.metrics import cache_hits, cache_misses

logger = logging.getLogger(__name__)


async def get_cached(key: str, cache: str) -> Optional[dict]:
    redis = get_redis()
    if redis is None:
        return None
    try:
        v = await redis.get(key)
    except Exception as e:
        logger.warning(f"Cache retrieval failed: {e}")
        return None
    if v:
        cache_hits.labels(cache=cache).inc()
        return json.loads(v)
    cache_misses.labels(cache=cache).inc()
    return None


async def set_cached(key: str, value: dict) -> None:
    redis = get_redis()
    if redis is None:
        return
    try:
        await redis.set(key, json.dumps(value, default=str), ex=settings.PRICE_CACHE_TTL)
    except Exception as e:
        logger.warning(f"Cache write failed: {e}")
