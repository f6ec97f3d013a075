# base_counter/domains/faucet/repository.py
import uuid
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import select

from base_counter.core.database import session_scope
from base_counter.domains.faucet.models import FaucetClaim


async def save_claim(claim_data: Dict) -> FaucetClaim:
    async with session_scope() as db:
        claim = FaucetClaim(
            id=str(uuid.uuid4()),
            user_address=claim_data["user_address"].lower(),
            amount=str(claim_data["amount"]),
            transaction_hash=claim_data["transaction_hash"],
            block_number=claim_data["block_number"],
            wallet_index=claim_data.get("wallet_index"),
            claimed_at=claim_data["claimed_at"],
        )
        db.add(claim)
        return claim


async def get_claim(user_address: str) -> Optional[FaucetClaim]:
    async with session_scope() as db:
        result = await db.execute(
            select(FaucetClaim)
            .filter(FaucetClaim.user_address == user_address.lower())
            .order_by(FaucetClaim.claimed_at)
            .limit(1)
        )
        return result.scalar_one_or_none()


async def get_wallet_usage() -> List[Dict]:
    """Usage per payout wallet; amounts are summed as decimals."""
    async with session_scope() as db:
        result = await db.execute(select(FaucetClaim.wallet_index, FaucetClaim.amount))
        stats: Dict[Optional[int], Dict] = {}
        for wallet_index, amount in result.all():
            entry = stats.setdefault(wallet_index, {"usage_count": 0, "total": Decimal(0)})
            entry["usage_count"] += 1
            entry["total"] += Decimal(amount or "0")

    return [
        {
            "wallet_index": index,
            "usage_count": entry["usage_count"],
            "total_amount": str(entry["total"]),
        }
        for index, entry in sorted(stats.items(), key=lambda item: (item[0] is None, item[0] or 0))
    ]
