from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PrimaryAddress(BaseModel):
    eth_address: Optional[str] = None
    sol_address: Optional[str] = None


class VerifiedAddresses(BaseModel):
    eth_addresses: List[str] = Field(default_factory=list)
    sol_addresses: List[str] = Field(default_factory=list)
    primary: Optional[PrimaryAddress] = None


class NeynarUser(BaseModel):
    """Subset of the Neynar user object; unknown fields are kept for the cache."""

    model_config = ConfigDict(extra="allow")

    fid: int
    username: Optional[str] = None
    display_name: Optional[str] = None
    pfp_url: Optional[str] = None
    custody_address: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0
    verifications: List[str] = Field(default_factory=list)
    verified_addresses: Optional[VerifiedAddresses] = None
