# base_counter/domains/faucet/service.py
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from base_counter.domains.faucet import repository
from base_counter.domains.faucet.models import FaucetClaim
from base_counter.domains.game import repository as game_repository
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


class DuplicateFaucetClaim(ValueError):
    pass


class FaucetService:
    async def record_claim(self, claim_data: Dict) -> FaucetClaim:
        try:
            claim = await repository.save_claim({**claim_data, "claimed_at": utcnow()})
        except IntegrityError:
            raise DuplicateFaucetClaim(f"Transaction {claim_data['transaction_hash']} already recorded")
        flagged = await game_repository.mark_faucet_claimed(claim_data["user_address"])
        logger.info(
            f"Faucet claim recorded for {claim.user_address} via wallet {claim.wallet_index} "
            f"({flagged} player records flagged)"
        )
        return claim

    async def has_user_claimed(self, user_address: str) -> bool:
        if await repository.get_claim(user_address) is not None:
            return True
        player = await game_repository.get_player_by_address(user_address)
        return bool(player and player.faucet_claimed)

    async def get_claim(self, user_address: str) -> Optional[FaucetClaim]:
        return await repository.get_claim(user_address)

    async def get_wallet_usage_stats(self) -> List[Dict]:
        return await repository.get_wallet_usage()


faucet_service = FaucetService()
