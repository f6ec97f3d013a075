import random

import pytest
from eth_account import Account
from eth_account.messages import encode_defunct

from base_counter.core.config import settings
from base_counter.domains.rewards.crypto_service import RewardSigner
from base_counter.domains.rewards.service import (
    generate_counter_reward,
    generate_gift_box_reward,
    sign_reward,
)
from base_counter.domains.rewards.tokens import TokenType, get_token_address, to_token_units
from base_counter.shared.errors import ConfigurationError

RECIPIENT = "0x1111111111111111111111111111111111111111"


def test_token_units_round_down():
    assert to_token_units(0.0015, 6) == 1500
    assert to_token_units(0.0000019, 6) == 1
    assert to_token_units(0.1, 18) == 10 ** 17
    assert to_token_units(0, 6) == 0


def test_token_units_reject_negative():
    with pytest.raises(ValueError):
        to_token_units(-0.01, 6)


def test_none_token_has_no_address():
    with pytest.raises(ValueError):
        get_token_address(TokenType.NONE)
    assert get_token_address("usdc") == settings.USDC_ADDRESS


def test_low_follower_reward_is_flat():
    assert generate_counter_reward(0) == settings.LOW_FOLLOWER_REWARD
    assert generate_counter_reward(settings.LOW_FOLLOWER_THRESHOLD - 1) == settings.LOW_FOLLOWER_REWARD


def test_counter_reward_in_band():
    rng = random.Random(42)
    for _ in range(50):
        amount = generate_counter_reward(settings.LOW_FOLLOWER_THRESHOLD, rng)
        assert settings.COUNTER_REWARD_MIN <= amount <= settings.COUNTER_REWARD_MAX


def test_gift_box_reward_is_usdc_in_band():
    token_type, amount = generate_gift_box_reward(120, random.Random(7))
    assert token_type == TokenType.USDC
    assert settings.GIFT_BOX_REWARD_MIN <= amount <= settings.GIFT_BOX_REWARD_MAX


def test_signature_recovers_to_signer():
    signer = RewardSigner()
    reward = sign_reward(RECIPIENT, 0.0015, TokenType.USDC, signer)
    assert reward.amount_units == 1500
    assert reward.token_address == settings.USDC_ADDRESS

    digest = RewardSigner.payout_hash(RECIPIENT, settings.USDC_ADDRESS, 1500)
    recovered = Account.recover_message(encode_defunct(primitive=digest), signature=reward.signature)
    assert recovered == signer.address
    assert recovered == Account.from_key(settings.SIGNER_PRIVATE_KEY).address


def test_signature_binds_amount():
    signer = RewardSigner()
    reward = sign_reward(RECIPIENT, 0.0015, TokenType.USDC, signer)
    digest = RewardSigner.payout_hash(RECIPIENT, settings.USDC_ADDRESS, 1501)
    recovered = Account.recover_message(encode_defunct(primitive=digest), signature=reward.signature)
    assert recovered != signer.address


def test_cannot_sign_none_token():
    with pytest.raises(ValueError):
        sign_reward(RECIPIENT, 0.01, TokenType.NONE)


def test_missing_key_is_configuration_error(monkeypatch):
    monkeypatch.setattr(settings, "SIGNER_PRIVATE_KEY", None)
    with pytest.raises(ConfigurationError):
        RewardSigner().check_configured()
