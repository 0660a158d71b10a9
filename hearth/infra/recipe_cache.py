"""Redis cache of successful extractions, keyed by source URL.

The cache is an optimization only: any Redis error is logged and the
caller carries on as if it were a miss.
"""

import hashlib
import logging
from typing import Optional

from redis.exceptions import RedisError

from hearth.infra.redis_cache import get_json, set_json
from hearth.parsing import ExtractedRecipe
from hearth.settings import settings

logger = logging.getLogger("hearth.cache")


def recipe_cache_key(url: str) -> str:
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
    return f"hearth:extract:{digest}"


async def get_cached_recipe(url: str) -> Optional[ExtractedRecipe]:
    if not settings.extract_cache_enabled:
        return None
    try:
        hit = await get_json(recipe_cache_key(url))
    except RedisError as e:
        logger.warning(f"Recipe cache read failed, bypassing: {e}")
        return None
    if hit is None:
        return None
    return ExtractedRecipe.model_validate(hit)


async def store_recipe(recipe: ExtractedRecipe) -> None:
    if not settings.extract_cache_enabled:
        return
    try:
        await set_json(
            recipe_cache_key(recipe.source_url),
            recipe.model_dump(mode="json"),
            settings.extract_cache_ttl_sec,
        )
    except RedisError as e:
        logger.warning(f"Recipe cache write failed: {e}")
