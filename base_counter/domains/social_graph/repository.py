# base_counter/domains/social_graph/repository.py
from datetime import datetime
from typing import Optional

from sqlalchemy import select

from base_counter.core.database import session_scope
from base_counter.domains.social_graph.models import CachedUser


async def get_cached_user(fid: int) -> Optional[CachedUser]:
    async with session_scope() as db:
        result = await db.execute(select(CachedUser).filter(CachedUser.fid == fid))
        return result.scalar_one_or_none()


async def save_cached_user(fid: int, user_data: dict, cached_at: datetime) -> None:
    async with session_scope() as db:
        cached = await db.get(CachedUser, fid)
        if cached is None:
            db.add(CachedUser(fid=fid, user_data=user_data, cached_at=cached_at))
        else:
            cached.user_data = user_data
            cached.cached_at = cached_at
