# base_counter/domains/social/repository.py
import uuid
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from base_counter.core.database import session_scope
from base_counter.domains.social.models import FollowAction


async def get_follow_action(user_address: str, platform: str) -> Optional[FollowAction]:
    async with session_scope() as db:
        result = await db.execute(
            select(FollowAction).filter(
                FollowAction.user_address == user_address.lower(),
                FollowAction.platform == platform,
            )
        )
        return result.scalar_one_or_none()


async def insert_follow_action(action: Dict) -> Optional[FollowAction]:
    """Returns None when the address already followed on that platform."""
    try:
        async with session_scope() as db:
            follow = FollowAction(
                id=str(uuid.uuid4()),
                user_address=action["user_address"].lower(),
                fid=action.get("fid"),
                platform=action["platform"],
                reward_claimed=action.get("reward_claimed", False),
                followed_at=action["followed_at"],
            )
            db.add(follow)
        return follow
    except IntegrityError:
        return None
