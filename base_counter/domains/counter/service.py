# base_counter/domains/counter/service.py
"""
Lever-pull rewards and the increments leaderboard.

The leaderboard cache holds the top LEADERBOARD_CACHE_SIZE entries; smaller
limits are served by slicing it, larger ones go straight to the database.
"""
from typing import Dict, List

from base_counter.core.config import settings
from base_counter.domains.counter import cache, repository
from base_counter.domains.rewards.service import generate_counter_reward, sign_reward
from base_counter.domains.rewards.tokens import TokenType
from base_counter.domains.social_graph.service import SocialGraphService, social_graph_service
from base_counter.shared.errors import AddressVerificationError
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


class CounterService:
    def __init__(self, social_graph: SocialGraphService = social_graph_service):
        self.social_graph = social_graph

    async def generate_signature(self, user_address: str, fid: int) -> Dict:
        user = await self.social_graph.get_user_data(fid)
        verified = await self.social_graph.verify_address_for_fid(user_address, fid, user=user)
        if not verified:
            logger.error(f"Security check failed: address {user_address} is not associated with FID {fid}")
            raise AddressVerificationError(
                "Address verification failed: Address is not associated with this FID"
            )

        follower_count = user.follower_count if user else 0
        logger.info(f"Security check passed: address {user_address} verified for FID {fid} ({follower_count} followers)")

        amount = generate_counter_reward(follower_count)
        reward = sign_reward(user_address, amount, TokenType.USDC)
        return {
            "signature": reward.signature,
            "token_address": reward.token_address,
            "amount": reward.amount,
            "amount_in_wei": str(reward.amount_units),
        }

    async def get_leaderboard(self, limit: int = 100) -> List[Dict]:
        cacheable = limit <= settings.LEADERBOARD_CACHE_SIZE
        if cacheable:
            try:
                cached = await cache.get_cached_leaderboard()
            except Exception as e:
                logger.warning(f"Leaderboard cache read failed: {e}")
                cached = None
            if cached is not None:
                return cached[:limit]

        entries = await repository.get_top_entries(
            settings.LEADERBOARD_CACHE_SIZE if cacheable else limit
        )
        if cacheable:
            try:
                await cache.set_cached_leaderboard(entries)
            except Exception as e:
                logger.warning(f"Leaderboard cache write failed: {e}")
        return entries[:limit]

    async def update_leaderboard(self, data: Dict) -> None:
        await repository.upsert_entry(data)
        try:
            await cache.invalidate_leaderboard_cache()
        except Exception as e:
            logger.error(f"Leaderboard cache invalidation failed for FID {data['fid']}: {e}")
            return
        logger.info(f"Leaderboard updated and cache invalidated for FID: {data['fid']}")


counter_service = CounterService()
