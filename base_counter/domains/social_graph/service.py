# base_counter/domains/social_graph/service.py
"""
Farcaster profile lookups and address ownership checks.

Profiles are cached in the database for USER_CACHE_TTL_SECONDS; a wallet
address belongs to an FID when it is the custody address, the primary
verified address, one of the verified addresses or one of the legacy
verifications.
"""
from datetime import timedelta
from typing import Optional

from base_counter.core.config import settings
from base_counter.domains.social_graph import repository
from base_counter.domains.social_graph.client import NeynarClient, neynar_client
from base_counter.domains.social_graph.schemas import NeynarUser
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value else None


def address_matches_user(address: str, user: NeynarUser) -> bool:
    if not address:
        return False
    address_lower = address.lower()

    if _lower(user.custody_address) == address_lower:
        return True

    verified = user.verified_addresses
    if verified is not None:
        if verified.primary is not None and _lower(verified.primary.eth_address) == address_lower:
            return True
        if any(addr.lower() == address_lower for addr in verified.eth_addresses):
            return True

    return any(addr.lower() == address_lower for addr in user.verifications)


class SocialGraphService:
    def __init__(self, client: NeynarClient = neynar_client):
        self.client = client
        self.cache_ttl = timedelta(seconds=settings.USER_CACHE_TTL_SECONDS)

    async def get_user_data(self, fid: int) -> Optional[NeynarUser]:
        """Cached profile if fresh, otherwise Neynar; None on any failure."""
        try:
            now = utcnow()
            cached = await repository.get_cached_user(fid)
            if cached is not None and now - cached.cached_at < self.cache_ttl:
                logger.debug(f"Using cached user data for FID: {fid}")
                return NeynarUser.model_validate(cached.user_data)

            logger.info(f"Fetching user data from Neynar API for FID: {fid}")
            user = await self.client.fetch_user(fid)
            if user is None:
                return None

            await repository.save_cached_user(fid, user.model_dump(mode="json"), now)
            return user
        except Exception as e:
            logger.error(f"Error getting user data for FID {fid}: {e}")
            return None

    async def verify_address_for_fid(
        self,
        address: str,
        fid: int,
        min_followers: Optional[int] = None,
        user: Optional[NeynarUser] = None,
    ) -> bool:
        """
        True when `address` belongs to `fid`. With `min_followers`, the
        profile must also have strictly more followers than that.
        """
        if user is None:
            user = await self.get_user_data(fid)
        if user is None:
            return False

        if min_followers is not None and user.follower_count <= min_followers:
            logger.error(
                f"Security Alert: follower count requirement not met "
                f"fid={fid} followers={user.follower_count} required>{min_followers}"
            )
            return False

        if not address_matches_user(address, user):
            verified = user.verified_addresses
            logger.error(
                "Security Alert: address verification failed "
                f"fid={fid} provided={address.lower() if address else None} "
                f"custody={_lower(user.custody_address)} "
                f"primary={_lower(verified.primary.eth_address) if verified and verified.primary else None} "
                f"verified={[a.lower() for a in verified.eth_addresses] if verified else []} "
                f"verifications={[a.lower() for a in user.verifications]}"
            )
            return False

        logger.info(f"Address verification passed fid={fid} address={address.lower()}")
        return True


social_graph_service = SocialGraphService()
