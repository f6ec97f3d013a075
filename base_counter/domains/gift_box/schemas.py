from datetime import datetime
from typing import Optional

from pydantic import Field

from base_counter.shared.schemas.base import CamelModel


class ClaimGiftBoxRequest(CamelModel):
    user_address: str = Field(min_length=42, max_length=42)
    fid: int = Field(gt=0)


class GiftBoxStatusOut(CamelModel):
    can_see: bool
    can_claim: bool
    claims_today: int
    remaining_claims: int
    last_claim_time: Optional[datetime] = None


class GiftBoxClaimOut(CamelModel):
    success: bool = True
    token_type: str
    amount: float
    amount_in_wei: str
    signature: Optional[str] = None
    claims_today: int
    remaining_claims: int
    username: Optional[str] = None
    pfp_url: Optional[str] = None
    score: int = 0


class GiftBoxStatsOut(CamelModel):
    total_claims: int
    total_usdc: float
    total_pepe: float
    total_boop: float
    total_crsh: float
    claims_today: int
    remaining_claims: int
    total_rewards_claimed: int
