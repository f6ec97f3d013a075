import os

os.environ.setdefault("ENVIRONMENT", "local")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_SECRET_KEY"] = "test-secret"
os.environ["SIGNER_PRIVATE_KEY"] = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
os.environ["NEYNAR_API_KEY"] = "neynar-primary"
os.environ["NEYNAR_API_KEY2"] = "neynar-2"
os.environ["NEYNAR_API_KEY3"] = "neynar-3"
os.environ["PINATA_API_KEY"] = "pinata-1"
os.environ["PINATA_SECRET_API_KEY"] = "pinata-secret-1"

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from base_counter.core import database
from base_counter.core.redis import RedisManager
from base_counter.shared.utils.security import create_fused_key, generate_random_string


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value
        self.ttls[key] = ex

    async def delete(self, key):
        self.store.pop(key, None)
        self.ttls.pop(key, None)

    async def ping(self):
        return True


@pytest.fixture
async def db(monkeypatch):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    database.load_models()
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(
        database,
        "AsyncSessionLocal",
        async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )
    yield engine
    await engine.dispose()


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(RedisManager, "_instance", fake)
    return fake


@pytest.fixture
async def client(db, fake_redis):
    from base_counter.main import app

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def auth_headers():
    def make():
        random_string = generate_random_string()
        return {"x-fused-key": create_fused_key(random_string), "x-random-string": random_string}

    return make
