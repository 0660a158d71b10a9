import pytest

from hearth.infra.redis_cache import get_json, set_json


@pytest.mark.asyncio
async def test_get_json_miss(mock_redis):
    assert await get_json("hearth:test:missing") is None


@pytest.mark.asyncio
async def test_set_then_get_json(mock_redis):
    await set_json("hearth:test:k", {"title": "Toast", "steps": [1, 2]}, ttl_sec=60)

    assert await get_json("hearth:test:k") == {"title": "Toast", "steps": [1, 2]}
    ttl = await mock_redis.ttl("hearth:test:k")
    assert 0 < ttl <= 60
