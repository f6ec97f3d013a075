from typing import List, Optional, Union

from pydantic import Field

from base_counter.shared.schemas.base import CamelModel


class GenerateSignatureRequest(CamelModel):
    user_address: Optional[str] = None
    fid: Optional[Union[int, str]] = None


class GenerateSignatureResponse(CamelModel):
    success: bool = True
    signature: str
    token_address: str
    amount: float
    amount_in_wei: str


class LeaderboardEntryOut(CamelModel):
    fid: int
    username: str
    image_url: str = ""
    user_address: str
    total_increments: int = 0
    total_rewards: float = 0.0


class LeaderboardResponse(CamelModel):
    success: bool = True
    leaderboard: List[LeaderboardEntryOut]


class UpdateLeaderboardRequest(CamelModel):
    fid: Optional[int] = None
    username: Optional[str] = None
    image_url: Optional[str] = None
    user_address: Optional[str] = None
    total_increments: int = Field(default=0, ge=0)
    total_rewards: Optional[float] = Field(default=None, ge=0)
