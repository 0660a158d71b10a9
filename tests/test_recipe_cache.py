import pytest
from unittest.mock import AsyncMock, patch
from redis.exceptions import ConnectionError as RedisConnectionError

from hearth.infra import recipe_cache
from hearth.infra.recipe_cache import get_cached_recipe, recipe_cache_key, store_recipe
from hearth.parsing import ExtractedRecipe, ExtractedStep

URL = "https://example.com/r/1"


def make_recipe() -> ExtractedRecipe:
    return ExtractedRecipe(
        title="Toast",
        steps=[ExtractedStep(text="Toast bread.", position=1)],
        prep_time=2,
        source_url=URL,
    )


def test_cache_key_is_stable_and_opaque():
    key = recipe_cache_key(URL)
    assert key == recipe_cache_key(URL)
    assert key.startswith("hearth:extract:")
    assert URL not in key


@pytest.mark.asyncio
async def test_miss_then_hit(mock_redis):
    assert await get_cached_recipe(URL) is None

    await store_recipe(make_recipe())

    hit = await get_cached_recipe(URL)
    assert hit == make_recipe()
    assert await mock_redis.ttl(recipe_cache_key(URL)) > 0


@pytest.mark.asyncio
async def test_disabled_cache_is_skipped(mock_redis, monkeypatch):
    monkeypatch.setattr(recipe_cache.settings, "extract_cache_enabled", False)

    await store_recipe(make_recipe())

    assert await mock_redis.get(recipe_cache_key(URL)) is None
    assert await get_cached_recipe(URL) is None


@pytest.mark.asyncio
async def test_redis_errors_are_bypassed():
    failing = AsyncMock(side_effect=RedisConnectionError("down"))
    with patch("hearth.infra.redis_cache.get_redis", failing):
        assert await get_cached_recipe(URL) is None
        await store_recipe(make_recipe())
