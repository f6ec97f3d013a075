# base_counter/domains/mints/repository.py
import uuid
from datetime import datetime
from typing import Dict, List

from sqlalchemy import desc, func, select

from base_counter.core.database import session_scope
from base_counter.domains.mints.models import DailyMintCount, UserMint


async def get_daily_mint_count(user_address: str, day: str) -> int:
    async with session_scope() as db:
        result = await db.execute(
            select(DailyMintCount.count).filter(
                DailyMintCount.user_address == user_address.lower(),
                DailyMintCount.date == day,
            )
        )
        return result.scalar_one_or_none() or 0


async def save_mint(mint_data: Dict, day: str, minted_at: datetime) -> UserMint:
    """Store the mint and bump the per-day counter in one transaction."""
    address = mint_data["user_address"].lower()
    async with session_scope() as db:
        mint = UserMint(
            id=str(uuid.uuid4()),
            user_address=address,
            score=mint_data.get("score", 0),
            token_id=mint_data.get("token_id"),
            trait=mint_data.get("trait"),
            signature=mint_data["signature"],
            minted_at=minted_at,
        )
        db.add(mint)

        result = await db.execute(
            select(DailyMintCount).filter(
                DailyMintCount.user_address == address, DailyMintCount.date == day
            )
        )
        daily = result.scalar_one_or_none()
        if daily is None:
            daily = DailyMintCount(id=str(uuid.uuid4()), user_address=address, date=day, count=0)
            db.add(daily)
        daily.count = (daily.count or 0) + 1
        daily.last_mint_at = minted_at
        return mint


async def get_mint_history(user_address: str, limit: int = 50) -> List[UserMint]:
    async with session_scope() as db:
        result = await db.execute(
            select(UserMint)
            .filter(UserMint.user_address == user_address.lower())
            .order_by(desc(UserMint.minted_at))
            .limit(limit)
        )
        return list(result.scalars().all())


async def count_mints(since: datetime | None = None) -> int:
    async with session_scope() as db:
        query = select(func.count()).select_from(UserMint)
        if since is not None:
            query = query.filter(UserMint.minted_at >= since)
        result = await db.execute(query)
        return result.scalar_one()


async def get_top_scores(limit: int = 10) -> List[Dict]:
    async with session_scope() as db:
        result = await db.execute(
            select(UserMint.user_address, UserMint.score, UserMint.minted_at)
            .order_by(desc(UserMint.score))
            .limit(limit)
        )
        return [
            {"user_address": row.user_address, "score": row.score, "minted_at": row.minted_at}
            for row in result.all()
        ]
