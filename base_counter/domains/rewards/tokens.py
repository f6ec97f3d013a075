# base_counter/domains/rewards/tokens.py
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from enum import Enum
from typing import Optional

from base_counter.core.config import settings


class TokenType(str, Enum):
    USDC = "usdc"
    PEPE = "pepe"
    CRSH = "crsh"
    BOOP = "boop"
    NONE = "none"


@dataclass(frozen=True)
class RewardToken:
    type: TokenType
    address: Optional[str]
    decimals: int


TOKENS = {
    TokenType.USDC: RewardToken(TokenType.USDC, settings.USDC_ADDRESS, 6),
    TokenType.PEPE: RewardToken(TokenType.PEPE, "0x25d887Ce7a35172C62FeBFD67a1856F20FaEbB00", 18),
    TokenType.CRSH: RewardToken(TokenType.CRSH, "0xe461003E78A7bF4F14F0D30b3ac490701980aB07", 18),
    TokenType.BOOP: RewardToken(TokenType.BOOP, "0x13A7DeDb7169a17bE92B0E3C7C2315B46f4772B3", 18),
    TokenType.NONE: RewardToken(TokenType.NONE, None, 0),
}


def get_token(token_type: TokenType | str) -> RewardToken:
    return TOKENS[TokenType(token_type)]


def get_token_address(token_type: TokenType | str) -> str:
    token = get_token(token_type)
    if token.address is None:
        raise ValueError(f'Cannot get token address for "{token.type.value}" type')
    return token.address


def to_token_units(amount: float, decimals: int) -> int:
    """floor(amount * 10**decimals), without binary float drift."""
    if amount < 0:
        raise ValueError("Reward amount cannot be negative")
    scaled = Decimal(str(amount)) * (Decimal(10) ** decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))
