import json
from typing import Any, Optional

from redis.asyncio import Redis

from .config import settings


class RedisManager:
    _instance = None

    @classmethod
    def get_client(cls) -> Redis:
        if cls._instance is None:
            cls._instance = Redis.from_url(settings.REDIS_URL, decode_responses=True)
        return cls._instance


async def get_json(key: str) -> Optional[Any]:
    raw = await RedisManager.get_client().get(key)
    if raw is None:
        return None
    return json.loads(raw)


async def set_json(key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
    await RedisManager.get_client().set(key, json.dumps(value), ex=ttl_seconds)


async def delete(key: str) -> None:
    await RedisManager.get_client().delete(key)


async def check_connection() -> bool:
    try:
        client = RedisManager.get_client()
        await client.ping()
        return True
    except Exception:
        return False
