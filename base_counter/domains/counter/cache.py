# base_counter/domains/counter/cache.py
from typing import Dict, List, Optional

from base_counter.core import redis
from base_counter.core.config import settings


async def get_cached_leaderboard() -> Optional[List[Dict]]:
    return await redis.get_json(settings.LEADERBOARD_CACHE_KEY)


async def set_cached_leaderboard(entries: List[Dict]) -> None:
    await redis.set_json(
        settings.LEADERBOARD_CACHE_KEY, entries, ttl_seconds=settings.LEADERBOARD_CACHE_TTL_SECONDS
    )


async def invalidate_leaderboard_cache() -> None:
    await redis.delete(settings.LEADERBOARD_CACHE_KEY)
