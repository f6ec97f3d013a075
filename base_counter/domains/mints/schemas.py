from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from base_counter.shared.schemas.base import CamelModel


class RecordMintRequest(CamelModel):
    user_address: str = Field(min_length=42, max_length=42)
    score: int = Field(default=0, ge=0)
    token_id: Optional[int] = None
    trait: Optional[str] = None
    signature: str


class MintOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    user_address: str
    score: int
    token_id: Optional[int] = None
    trait: Optional[str] = None
    signature: str
    minted_at: datetime


class MintStatusOut(CamelModel):
    can_mint: bool
    mints_today: int
    daily_limit: int
    has_minted_today: bool


class TopScoreOut(CamelModel):
    user_address: str
    score: int
    minted_at: datetime


class MintStatsOut(CamelModel):
    total_mints: int
    today_mints: int
    top_scores: List[TopScoreOut]
