import pytest
import fakeredis
import fakeredis.aioredis
from fastapi.testclient import TestClient

from hearth.main import app, limiter
from hearth.infra import redis_client
from hearth.infra.ratelimit import FixedWindowRateLimiter
from hearth.deps import get_extract_limiter


@pytest.fixture(autouse=True)
def mock_redis():
    server = fakeredis.FakeServer()
    async_redis = fakeredis.aioredis.FakeRedis(server=server, decode_responses=True)

    # Force the client into the infra module
    redis_client._redis_async = async_redis

    yield async_redis

    # Cleanup
    redis_client._redis_async = None


@pytest.fixture(autouse=True)
def reset_app_limiter():
    limiter.reset()
    yield


@pytest.fixture
def extract_limiter():
    """Fresh extraction limiter per test so counts never leak between tests."""
    rl = FixedWindowRateLimiter(max_requests=30, window_ms=15 * 60 * 1000)
    app.dependency_overrides[get_extract_limiter] = lambda: rl
    yield rl
    app.dependency_overrides.pop(get_extract_limiter, None)


@pytest.fixture
def client(extract_limiter):
    with TestClient(app) as c:
        yield c


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
