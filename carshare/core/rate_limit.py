import logging
from fastapi import HTTPException, Request
from carshare.core.redis import get_redis
from carshare.core.config import settings
from carshare.core.metrics import rate_limit_exceeded

logger = logging.getLogger(__name__)


async def check_rate_limit(request: Request):
    redis = get_redis()
    if redis is None:
        return

    client = request.client.host if request.client else "unknown"
    key = f"rl:{client}"
    current = await redis.get(key)
    if current is None:
        await redis.set(key, "1", ex=settings.RATE_LIMIT_WINDOW)
        return
    count = int(current)
    if count >= settings.RATE_LIMIT:
        rate_limit_exceeded.labels(client=client).inc()
        logger.warning(f"Rate limit exceeded for {client}")
        raise HTTPException(status_code=429, detail="Rate limit exceeded")
    await redis.incr(key)
