from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from base_counter.shared.schemas.base import CamelModel


class RecordFaucetClaimRequest(CamelModel):
    user_address: str = Field(min_length=42, max_length=42)
    amount: Decimal = Field(gt=0)
    transaction_hash: str = Field(min_length=66, max_length=66)
    block_number: int = Field(ge=0)
    wallet_index: Optional[int] = Field(default=None, ge=1)


class FaucetClaimOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    user_address: str
    amount: str
    transaction_hash: str
    block_number: int
    wallet_index: Optional[int] = None
    claimed_at: datetime


class FaucetStatusOut(CamelModel):
    has_claimed: bool
    claim: Optional[FaucetClaimOut] = None


class WalletUsageOut(CamelModel):
    wallet_index: Optional[int] = None
    usage_count: int
    total_amount: str


class WalletUsageResponse(CamelModel):
    wallets: List[WalletUsageOut]
