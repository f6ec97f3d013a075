# base_counter/domains/gift_box/logic.py
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass
class GiftBoxWindow:
    can_claim: bool
    claims_today: int
    remaining_claims: int
    last_claim_at: Optional[datetime]


def evaluate_window(
    last_claim_at: Optional[datetime],
    claims_in_period: int,
    now: datetime,
    per_day: int,
    window: timedelta,
) -> GiftBoxWindow:
    """
    The period starts at the first claim and lasts `window`; once it has
    elapsed the counter is treated as zero.
    """
    if last_claim_at is None or now >= last_claim_at + window:
        return GiftBoxWindow(True, 0, per_day, last_claim_at)

    claims = claims_in_period or 0
    return GiftBoxWindow(
        can_claim=claims < per_day,
        claims_today=claims,
        remaining_claims=max(0, per_day - claims),
        last_claim_at=last_claim_at,
    )
