# base_counter/domains/counter/repository.py
from typing import Dict, List

from sqlalchemy import desc, select

from base_counter.core.database import session_scope
from base_counter.domains.counter.models import LeaderboardEntry
from base_counter.shared.utils.time import utcnow


def _entry_to_dict(entry: LeaderboardEntry) -> Dict:
    return {
        "fid": entry.fid,
        "username": entry.username,
        "image_url": entry.image_url,
        "user_address": entry.user_address,
        "total_increments": entry.total_increments,
        "total_rewards": entry.total_rewards,
    }


async def get_top_entries(limit: int) -> List[Dict]:
    async with session_scope() as db:
        result = await db.execute(
            select(LeaderboardEntry)
            .order_by(desc(LeaderboardEntry.total_increments), LeaderboardEntry.last_update_at)
            .limit(limit)
        )
        return [_entry_to_dict(entry) for entry in result.scalars().all()]


async def upsert_entry(data: Dict) -> None:
    async with session_scope() as db:
        entry = await db.get(LeaderboardEntry, data["fid"])
        if entry is None:
            entry = LeaderboardEntry(fid=data["fid"])
            db.add(entry)
        entry.username = data["username"]
        entry.image_url = data.get("image_url") or ""
        entry.user_address = data["user_address"].lower()
        entry.total_increments = data.get("total_increments", 0)
        entry.total_rewards = data.get("total_rewards") or 0.0
        entry.last_update_at = utcnow()
