import asyncio
from datetime import datetime, timedelta

import pytest

from base_counter.core.database import session_scope
from base_counter.domains.game.models import GameScore
from base_counter.domains.gift_box import repository
from base_counter.domains.gift_box.logic import evaluate_window
from base_counter.domains.gift_box.service import GiftBoxService, gift_box_service
from base_counter.domains.rewards.crypto_service import RewardSigner
from base_counter.domains.social_graph.schemas import NeynarUser
from base_counter.domains.social_graph.service import SocialGraphService
from base_counter.shared.errors import AddressVerificationError, ClaimLimitError, ConfigurationError
from base_counter.shared.utils.time import utcnow

ADDRESS = "0x1111111111111111111111111111111111111111"
DAY = timedelta(hours=24)


class StubClient:
    def __init__(self, user):
        self.user = user

    async def fetch_user(self, fid):
        return self.user


def make_service(follower_count=100, signer=None):
    user = NeynarUser(fid=42, custody_address=ADDRESS, follower_count=follower_count)
    return GiftBoxService(
        social_graph=SocialGraphService(client=StubClient(user)),
        signer=signer or RewardSigner(),
    )


async def age_last_claim(fid, hours):
    async with session_scope() as s:
        player = await s.get(GameScore, fid)
        player.last_gift_box_at = player.last_gift_box_at - timedelta(hours=hours)


def test_window_fresh_player():
    window = evaluate_window(None, 0, datetime(2025, 1, 1), 1, DAY)
    assert window.can_claim and window.remaining_claims == 1


def test_window_exhausted_then_rolls_over():
    claimed = datetime(2025, 1, 1, 12)
    window = evaluate_window(claimed, 1, claimed + timedelta(hours=23), 1, DAY)
    assert not window.can_claim
    assert window.claims_today == 1 and window.remaining_claims == 0

    window = evaluate_window(claimed, 1, claimed + DAY, 1, DAY)
    assert window.can_claim
    assert window.claims_today == 0


async def test_claim_once_per_day(db):
    service = make_service()
    result = await service.claim(ADDRESS, 42)
    assert result["token_type"] == "usdc"
    assert result["claims_today"] == 1
    assert result["remaining_claims"] == 0
    assert result["signature"].startswith("0x")

    with pytest.raises(ClaimLimitError):
        await service.claim(ADDRESS, 42)

    window = await service.get_window(42)
    assert not window.can_claim


async def test_claim_available_after_window(db):
    service = make_service()
    await service.claim(ADDRESS, 42)
    await age_last_claim(42, 25)

    assert (await service.get_window(42)).can_claim
    result = await service.claim(ADDRESS, 42)
    assert result["claims_today"] == 1

    stats = await service.get_stats(ADDRESS, 42)
    assert stats["total_claims"] == 2
    assert stats["total_rewards_claimed"] == 2
    assert stats["total_usdc"] > 0


async def test_follower_floor_does_not_consume_slot(db):
    service = make_service(follower_count=20)
    with pytest.raises(AddressVerificationError):
        await service.claim(ADDRESS, 42)
    assert (await service.get_window(42)).can_claim


async def test_unsigned_claim_does_not_consume_slot(db, monkeypatch):
    from base_counter.core.config import settings

    monkeypatch.setattr(settings, "SIGNER_PRIVATE_KEY", None)
    service = make_service(signer=RewardSigner())
    with pytest.raises(ConfigurationError):
        await service.claim(ADDRESS, 42)
    assert (await service.get_window(42)).can_claim


async def test_malformed_signer_key_does_not_consume_slot(db, monkeypatch):
    from base_counter.core.config import settings

    monkeypatch.setattr(settings, "SIGNER_PRIVATE_KEY", "0x1234")
    service = make_service(signer=RewardSigner())
    with pytest.raises(ValueError):
        await service.claim(ADDRESS, 42)
    assert (await service.get_window(42)).can_claim


async def test_unrecorded_claim_releases_slot(db, monkeypatch):
    async def broken_save(claim_data):
        raise RuntimeError("database unavailable")

    service = make_service()
    await service.claim(ADDRESS, 42)
    await age_last_claim(42, 25)

    monkeypatch.setattr(repository, "save_claim", broken_save)
    with pytest.raises(RuntimeError):
        await service.claim(ADDRESS, 42)

    assert (await service.get_window(42)).can_claim
    stats = await service.get_stats(ADDRESS, 42)
    assert stats["total_rewards_claimed"] == 1


async def test_concurrent_reservations_new_player(db):
    now = utcnow()
    results = await asyncio.gather(
        repository.reserve_claim_slot(7, ADDRESS, now, now - DAY, 1),
        repository.reserve_claim_slot(7, ADDRESS, now, now - DAY, 1),
    )
    assert sorted(results, key=lambda r: r is None) == [1, None]


async def test_reservation_respects_quota(db):
    now = utcnow()
    assert await repository.reserve_claim_slot(8, ADDRESS, now, now - DAY, 2) == 1
    assert await repository.reserve_claim_slot(8, ADDRESS, now, now - DAY, 2) == 2
    assert await repository.reserve_claim_slot(8, ADDRESS, now, now - DAY, 2) is None

    later = now + DAY
    assert await repository.reserve_claim_slot(8, ADDRESS, later, later - DAY, 2) == 1


async def test_claim_endpoint(client, auth_headers, monkeypatch):
    user = NeynarUser(fid=42, custody_address=ADDRESS, follower_count=100)
    monkeypatch.setattr(gift_box_service, "social_graph", SocialGraphService(client=StubClient(user)))

    r = await client.get("/api/gift-box/status?fid=42")
    assert r.json()["canClaim"] is True

    body = {"userAddress": ADDRESS, "fid": 42}
    r = await client.post("/api/gift-box/claim", json=body, headers=auth_headers())
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["tokenType"] == "usdc"

    r = await client.post("/api/gift-box/claim", json=body, headers=auth_headers())
    assert r.status_code == 429
    assert r.json() == {"success": False, "error": "Gift box already claimed in the last 24 hours"}

    r = await client.get(f"/api/gift-box/stats?address={ADDRESS}&fid=42")
    assert r.json()["totalClaims"] == 1
    assert r.json()["remainingClaims"] == 0
