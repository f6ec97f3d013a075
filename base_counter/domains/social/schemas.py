from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from base_counter.shared.schemas.base import CamelModel


class FollowRequest(CamelModel):
    user_address: str = Field(min_length=42, max_length=42)
    fid: Optional[int] = Field(default=None, ge=1)
    platform: str = "x"
    reward_claimed: bool = False


class FollowActionOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    user_address: str
    fid: Optional[int] = None
    platform: str
    reward_claimed: bool
    followed_at: datetime


class FollowStatusOut(CamelModel):
    has_followed: bool
    platform: str
