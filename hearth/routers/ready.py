import logging

from fastapi import APIRouter
from redis.exceptions import RedisError

from ..infra.redis_client import get_redis
from ..schemas import ReadyOut

router = APIRouter()
logger = logging.getLogger("hearth.ready")


@router.get("/ready", response_model=ReadyOut)
async def ready():
    redis_ok = False
    try:
        r = await get_redis()
        redis_ok = bool(await r.ping())
    except RedisError as e:
        logger.warning(f"Redis ping failed: {e}")
    return ReadyOut(ok=True, redis_ok=redis_ok)
