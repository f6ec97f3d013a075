# base_counter/domains/gift_box/service.py
"""
Gift box: one randomized USDC payout per FID per rolling 24 hours.

Eligibility needs an address owned by the FID and more than
GIFT_BOX_MIN_FOLLOWERS followers. The payout is signed before the period
slot is reserved, and the slot is released if the claim cannot be recorded.
"""
from datetime import timedelta
from typing import Dict, Optional

from base_counter.core.config import settings
from base_counter.domains.game import repository as game_repository
from base_counter.domains.gift_box import repository
from base_counter.domains.gift_box.logic import GiftBoxWindow, evaluate_window
from base_counter.domains.rewards.crypto_service import RewardSigner, reward_signer
from base_counter.domains.rewards.service import generate_gift_box_reward, sign_reward
from base_counter.domains.rewards.tokens import TokenType
from base_counter.domains.social_graph.service import SocialGraphService, social_graph_service
from base_counter.shared.errors import AddressVerificationError, ClaimLimitError
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


class GiftBoxService:
    def __init__(
        self,
        social_graph: SocialGraphService = social_graph_service,
        signer: RewardSigner = reward_signer,
    ):
        self.social_graph = social_graph
        self.signer = signer
        self.per_day = settings.GIFT_BOXES_PER_DAY
        self.window = timedelta(hours=settings.GIFT_BOX_WINDOW_HOURS)

    async def get_window(self, fid: int) -> GiftBoxWindow:
        player = await game_repository.get_player(fid)
        if player is None:
            return GiftBoxWindow(True, 0, self.per_day, None)
        return evaluate_window(
            player.last_gift_box_at,
            player.gift_box_claims_in_period or 0,
            utcnow(),
            self.per_day,
            self.window,
        )

    async def claim(self, user_address: str, fid: int) -> Dict:
        window = await self.get_window(fid)
        if not window.can_claim:
            raise ClaimLimitError("Gift box already claimed in the last 24 hours")

        player = await game_repository.get_player(fid)
        score = (player.current_season_score or 0) if player else 0
        username = player.username if player else None
        pfp_url = player.pfp_url if player else None

        token_type, amount = generate_gift_box_reward(score)

        verified = await self.social_graph.verify_address_for_fid(
            user_address, fid, min_followers=settings.GIFT_BOX_MIN_FOLLOWERS
        )
        if not verified:
            logger.error(f"Gift box security check failed for address {user_address} and FID {fid}")
            raise AddressVerificationError(
                "Address verification failed: Address is not associated with this FID"
            )

        # sign before reserving so a bad signer key never consumes the slot
        signature: Optional[str] = None
        amount_units = 0
        if token_type != TokenType.NONE:
            reward = sign_reward(user_address, amount, token_type, self.signer)
            signature = reward.signature
            amount_units = reward.amount_units

        now = utcnow()
        claims_today = await repository.reserve_claim_slot(
            fid, user_address.lower(), now, now - self.window, self.per_day
        )
        if claims_today is None:
            raise ClaimLimitError("Gift box already claimed in the last 24 hours")

        try:
            await repository.save_claim(
                {
                    "user_address": user_address,
                    "fid": fid,
                    "token_type": token_type.value,
                    "amount": amount,
                    "amount_units": amount_units,
                    "signature": signature,
                    "claimed_at": now,
                }
            )
        except Exception:
            await repository.release_claim_slot(fid)
            logger.error(f"Gift box claim for FID {fid} not recorded, slot released")
            raise
        logger.info(f"Gift box claimed by FID {fid}: {amount} {token_type.value}")

        return {
            "token_type": token_type.value,
            "amount": amount,
            "amount_in_wei": str(amount_units),
            "signature": signature,
            "claims_today": claims_today,
            "remaining_claims": max(0, self.per_day - claims_today),
            "username": username,
            "pfp_url": pfp_url,
            "score": score,
        }

    async def get_stats(self, user_address: str, fid: int) -> Dict:
        window = await self.get_window(fid)
        player = await game_repository.get_player(fid)
        claims = await repository.get_claims_for_address(user_address)

        totals = {token.value: 0.0 for token in TokenType if token != TokenType.NONE}
        for claim in claims:
            if claim.token_type in totals:
                totals[claim.token_type] += claim.amount

        return {
            "total_claims": len(claims),
            "total_usdc": totals[TokenType.USDC.value],
            "total_pepe": totals[TokenType.PEPE.value],
            "total_boop": totals[TokenType.BOOP.value],
            "total_crsh": totals[TokenType.CRSH.value],
            "claims_today": window.claims_today,
            "remaining_claims": window.remaining_claims,
            "total_rewards_claimed": (player.total_rewards_claimed or 0) if player else 0,
        }


gift_box_service = GiftBoxService()
