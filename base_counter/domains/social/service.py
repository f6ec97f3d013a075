# base_counter/domains/social/service.py
from typing import Dict

from base_counter.domains.social import repository
from base_counter.domains.social.models import FollowAction
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)

PLATFORM_ALIASES = {"x": "x", "twitter": "x"}


def normalize_platform(platform: str) -> str:
    try:
        return PLATFORM_ALIASES[platform.lower()]
    except KeyError:
        raise ValueError(f"Unsupported platform: {platform}")


class SocialService:
    async def has_user_followed(self, user_address: str, platform: str = "x") -> bool:
        action = await repository.get_follow_action(user_address, normalize_platform(platform))
        return action is not None

    async def save_follow_action(self, action: Dict) -> FollowAction:
        platform = normalize_platform(action.get("platform") or "x")
        existing = await repository.get_follow_action(action["user_address"], platform)
        if existing is not None:
            return existing

        saved = await repository.insert_follow_action(
            {**action, "platform": platform, "followed_at": utcnow()}
        )
        if saved is None:
            # lost the race against a concurrent insert
            return await repository.get_follow_action(action["user_address"], platform)

        logger.info(f"Follow action on {platform} recorded for {saved.user_address}")
        return saved


social_service = SocialService()
