# base_counter/domains/mints/service.py
from typing import Dict, List

from base_counter.core.config import settings
from base_counter.domains.game import repository as game_repository
from base_counter.domains.mints import repository
from base_counter.domains.mints.models import UserMint
from base_counter.shared.errors import ClaimLimitError
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import today_str, utcnow

logger = get_logger(__name__)


class MintService:
    def __init__(self, daily_limit: int | None = None):
        self.daily_limit = settings.DAILY_MINT_LIMIT if daily_limit is None else daily_limit

    async def get_daily_mint_count(self, user_address: str) -> int:
        return await repository.get_daily_mint_count(user_address, today_str())

    async def can_user_mint(self, user_address: str) -> bool:
        return await self.get_daily_mint_count(user_address) < self.daily_limit

    async def has_user_minted_today(self, user_address: str) -> bool:
        player = await game_repository.get_player_by_address(user_address)
        return bool(player and player.has_minted_today and player.last_mint_date == today_str())

    async def get_status(self, user_address: str) -> Dict:
        count = await self.get_daily_mint_count(user_address)
        return {
            "can_mint": count < self.daily_limit,
            "mints_today": count,
            "daily_limit": self.daily_limit,
            "has_minted_today": await self.has_user_minted_today(user_address),
        }

    async def record_mint(self, mint_data: Dict) -> UserMint:
        address = mint_data["user_address"]
        if not await self.can_user_mint(address):
            raise ClaimLimitError(f"Daily mint limit of {self.daily_limit} reached")

        now = utcnow()
        day = today_str(now)
        mint = await repository.save_mint(mint_data, day, now)
        await game_repository.set_daily_mint_status(address, True, day)
        logger.info(f"Recorded mint for {address.lower()} score={mint.score}")
        return mint

    async def get_mint_history(self, user_address: str, limit: int = 50) -> List[UserMint]:
        return await repository.get_mint_history(user_address, limit)

    async def get_total_mints(self) -> int:
        return await repository.count_mints()

    async def get_today_mints(self) -> int:
        midnight = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        return await repository.count_mints(since=midnight)

    async def get_stats(self, top: int = 10) -> Dict:
        return {
            "total_mints": await self.get_total_mints(),
            "today_mints": await self.get_today_mints(),
            "top_scores": await repository.get_top_scores(top),
        }

    async def reset_daily_mint_status(self) -> int:
        reset = await game_repository.reset_daily_mint_status()
        logger.info(f"Reset daily mint status for {reset} players")
        return reset


mint_service = MintService()
