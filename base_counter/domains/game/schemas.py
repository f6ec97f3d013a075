from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from base_counter.shared.schemas.base import CamelModel


class LeaderboardKind(str, Enum):
    SEASON = "season"
    ATH = "ath"
    NFT = "nft"
    MIXED = "mixed"


class SubmitScoreRequest(CamelModel):
    fid: int = Field(gt=0)
    score: int = Field(ge=0)
    level: int = Field(default=0, ge=0)
    pfp_url: str = ""
    username: Optional[str] = None
    user_address: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)


class NftInfoRequest(CamelModel):
    nft_name: str = Field(min_length=1)


class PlayerOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    fid: int
    username: Optional[str] = None
    pfp_url: Optional[str] = ""
    user_address: Optional[str] = None
    score: int = 0
    current_season_score: Optional[int] = None
    level: int = 0
    duration: Optional[int] = None
    daily_streak: int = 0
    longest_streak: int = 0
    last_play_date: Optional[str] = None
    nft_count: int = 0
    nft_name: Optional[str] = None
    has_nft: bool = False
    faucet_claimed: bool = False
    has_minted_today: bool = False
    last_game_at: Optional[datetime] = None


class LeaderboardOut(CamelModel):
    success: bool = True
    board: LeaderboardKind
    total: int
    players: List[PlayerOut]


class StreakOut(CamelModel):
    daily_streak: int = 0
    longest_streak: int = 0
    last_play_date: Optional[str] = None
