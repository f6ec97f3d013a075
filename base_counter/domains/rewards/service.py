# base_counter/domains/rewards/service.py
"""
Reward amounts and signed payouts.

Lever pulls pay a flat LOW_FOLLOWER_REWARD to accounts under
LOW_FOLLOWER_THRESHOLD followers and a random amount in
[COUNTER_REWARD_MIN, COUNTER_REWARD_MAX) otherwise. Gift boxes pay a random
amount in [GIFT_BOX_REWARD_MIN, GIFT_BOX_REWARD_MAX).
"""
import random
from dataclasses import dataclass
from typing import Optional

from base_counter.core.config import settings
from base_counter.domains.rewards.crypto_service import RewardSigner, reward_signer
from base_counter.domains.rewards.tokens import TokenType, get_token, to_token_units
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SignedReward:
    token_type: TokenType
    token_address: str
    amount: float
    amount_units: int
    signature: str


def _random_in_band(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    value = low + (rng or random).random() * (high - low)
    return round(value, 6)


def generate_counter_reward(follower_count: int, rng: Optional[random.Random] = None) -> float:
    if follower_count < settings.LOW_FOLLOWER_THRESHOLD:
        logger.info(f"User has {follower_count} followers, giving flat {settings.LOW_FOLLOWER_REWARD} USDC")
        return settings.LOW_FOLLOWER_REWARD
    return _random_in_band(settings.COUNTER_REWARD_MIN, settings.COUNTER_REWARD_MAX, rng)


def generate_gift_box_reward(score: int = 0, rng: Optional[random.Random] = None) -> tuple[TokenType, float]:
    amount = _random_in_band(settings.GIFT_BOX_REWARD_MIN, settings.GIFT_BOX_REWARD_MAX, rng)
    logger.info(f"Gift box: USDC reward {amount:.6f} for score {score}")
    return TokenType.USDC, amount


def sign_reward(
    recipient: str,
    amount: float,
    token_type: TokenType = TokenType.USDC,
    signer: RewardSigner = reward_signer,
) -> SignedReward:
    token = get_token(token_type)
    if token.address is None:
        raise ValueError(f'Cannot sign a "{token.type.value}" reward')
    amount_units = to_token_units(amount, token.decimals)
    signature = signer.sign(recipient, token.address, amount_units)
    logger.info(
        f"Signed reward recipient={recipient} token={token.address} "
        f"amount={amount} units={amount_units}"
    )
    return SignedReward(
        token_type=token.type,
        token_address=token.address,
        amount=amount,
        amount_units=amount_units,
        signature=signature,
    )
