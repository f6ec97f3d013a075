# base_counter/domains/gift_box/repository.py
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import case, or_, select, update
from sqlalchemy.exc import IntegrityError

from base_counter.core.database import session_scope
from base_counter.domains.game.models import GameScore
from base_counter.domains.gift_box.models import GiftBoxClaim


async def _claim_existing_slot(fid: int, now: datetime, cutoff: datetime, per_day: int) -> Optional[int]:
    period_over = or_(GameScore.last_gift_box_at.is_(None), GameScore.last_gift_box_at <= cutoff)
    async with session_scope() as db:
        result = await db.execute(
            update(GameScore)
            .where(GameScore.fid == fid)
            .where(or_(period_over, GameScore.gift_box_claims_in_period < per_day))
            .values(
                gift_box_claims_in_period=case(
                    (period_over, 1), else_=GameScore.gift_box_claims_in_period + 1
                ),
                last_gift_box_at=case((period_over, now), else_=GameScore.last_gift_box_at),
                total_rewards_claimed=GameScore.total_rewards_claimed + 1,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            return None
        claims = await db.execute(
            select(GameScore.gift_box_claims_in_period).filter(GameScore.fid == fid)
        )
        return claims.scalar_one()


async def reserve_claim_slot(
    fid: int, user_address: str, now: datetime, cutoff: datetime, per_day: int
) -> Optional[int]:
    """
    Take one gift box slot for `fid` with a conditional update, so two
    concurrent claims cannot both succeed. Returns the claim count of the
    current period, or None when the quota is exhausted.
    """
    async with session_scope() as db:
        exists = await db.get(GameScore, fid)

    if exists is not None:
        return await _claim_existing_slot(fid, now, cutoff, per_day)

    try:
        async with session_scope() as db:
            db.add(
                GameScore(
                    fid=fid,
                    pfp_url="",
                    user_address=user_address,
                    gift_box_claims_in_period=1,
                    last_gift_box_at=now,
                    total_rewards_claimed=1,
                )
            )
        return 1
    except IntegrityError:
        # a concurrent request created the row first
        return await _claim_existing_slot(fid, now, cutoff, per_day)


async def release_claim_slot(fid: int) -> None:
    """Give back a slot taken by reserve_claim_slot whose claim was not recorded."""
    async with session_scope() as db:
        await db.execute(
            update(GameScore)
            .where(GameScore.fid == fid)
            .where(GameScore.gift_box_claims_in_period > 0)
            .values(
                gift_box_claims_in_period=GameScore.gift_box_claims_in_period - 1,
                total_rewards_claimed=case(
                    (GameScore.total_rewards_claimed > 0, GameScore.total_rewards_claimed - 1),
                    else_=0,
                ),
            )
            .execution_options(synchronize_session=False)
        )


async def save_claim(claim_data: Dict) -> GiftBoxClaim:
    async with session_scope() as db:
        claim = GiftBoxClaim(
            id=str(uuid.uuid4()),
            user_address=claim_data["user_address"].lower(),
            fid=claim_data["fid"],
            token_type=claim_data["token_type"],
            amount=claim_data["amount"],
            amount_units=str(claim_data.get("amount_units", 0)),
            signature=claim_data.get("signature"),
            claimed_at=claim_data["claimed_at"],
        )
        db.add(claim)
        return claim


async def get_claims_for_address(user_address: str) -> List[GiftBoxClaim]:
    async with session_scope() as db:
        result = await db.execute(
            select(GiftBoxClaim).filter(GiftBoxClaim.user_address == user_address.lower())
        )
        return list(result.scalars().all())
