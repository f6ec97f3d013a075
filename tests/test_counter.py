import json

from eth_account import Account
from eth_account.messages import encode_defunct

from base_counter.core.config import settings
from base_counter.domains.counter import cache
from base_counter.domains.counter.service import counter_service
from base_counter.domains.rewards.crypto_service import RewardSigner
from base_counter.domains.social_graph.schemas import NeynarUser

ADDRESS = "0x1111111111111111111111111111111111111111"
STRANGER = "0x3333333333333333333333333333333333333333"


def use_profile(monkeypatch, user):
    async def get_user_data(fid):
        return user

    monkeypatch.setattr(counter_service.social_graph, "get_user_data", get_user_data)


def entry(fid, increments, address=ADDRESS):
    return {
        "fid": fid,
        "username": f"user{fid}",
        "imageUrl": f"https://img/{fid}.png",
        "userAddress": address,
        "totalIncrements": increments,
        "totalRewards": 0.01,
    }


async def test_generate_signature_requires_fields(client):
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Missing userAddress or fid"}


async def test_generate_signature_rejects_foreign_address(client, monkeypatch):
    use_profile(monkeypatch, NeynarUser(fid=9, custody_address=ADDRESS, follower_count=100))
    r = await client.post("/api/counter/generate-signature", json={"userAddress": STRANGER, "fid": 9})
    assert r.status_code == 403
    assert r.json()["success"] is False
    assert r.json()["error"].startswith("Address verification failed")


async def test_generate_signature_unknown_fid(client, monkeypatch):
    use_profile(monkeypatch, None)
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS, "fid": 9})
    assert r.status_code == 403


async def test_generate_signature_signs_verified_pull(client, monkeypatch):
    use_profile(monkeypatch, NeynarUser(fid=9, custody_address=ADDRESS, follower_count=100))
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS, "fid": 9})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["tokenAddress"] == settings.USDC_ADDRESS
    assert settings.COUNTER_REWARD_MIN <= body["amount"] <= settings.COUNTER_REWARD_MAX

    digest = RewardSigner.payout_hash(ADDRESS, settings.USDC_ADDRESS, int(body["amountInWei"]))
    signer = Account.recover_message(encode_defunct(primitive=digest), signature=body["signature"])
    assert signer == Account.from_key(settings.SIGNER_PRIVATE_KEY).address


async def test_low_follower_pull_is_flat(client, monkeypatch):
    use_profile(monkeypatch, NeynarUser(fid=9, custody_address=ADDRESS, follower_count=3))
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS, "fid": 9})
    assert r.status_code == 200
    assert r.json()["amount"] == settings.LOW_FOLLOWER_REWARD
    assert r.json()["amountInWei"] == "100"


async def test_update_leaderboard_requires_fields(client):
    r = await client.post("/api/counter/update-leaderboard", json={"fid": 1})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields"


async def test_leaderboard_cache_filled_and_invalidated(client, fake_redis):
    for fid, increments in ((1, 5), (2, 9)):
        r = await client.post("/api/counter/update-leaderboard", json=entry(fid, increments))
        assert r.json() == {"success": True}

    r = await client.get("/api/counter/leaderboard")
    board = r.json()["leaderboard"]
    assert [e["fid"] for e in board] == [2, 1]
    assert board[0]["userAddress"] == ADDRESS.lower()

    cache_key = settings.LEADERBOARD_CACHE_KEY
    assert len(json.loads(fake_redis.store[cache_key])) == 2
    assert fake_redis.ttls[cache_key] == settings.LEADERBOARD_CACHE_TTL_SECONDS

    await client.post("/api/counter/update-leaderboard", json=entry(1, 20))
    assert cache_key not in fake_redis.store

    r = await client.get("/api/counter/leaderboard?limit=1")
    assert [e["fid"] for e in r.json()["leaderboard"]] == [1]
    assert len(json.loads(fake_redis.store[cache_key])) == 2


async def test_leaderboard_served_from_cache(client, fake_redis):
    cached = [
        {"fid": 7, "username": "cached", "image_url": "", "user_address": ADDRESS,
         "total_increments": 99, "total_rewards": 0.5}
    ]
    fake_redis.store[settings.LEADERBOARD_CACHE_KEY] = json.dumps(cached)
    r = await client.get("/api/counter/leaderboard")
    assert r.json()["leaderboard"][0]["username"] == "cached"


async def test_generate_signature_non_numeric_fid(client):
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS, "fid": "abc"})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing userAddress or fid"


async def test_generate_signature_numeric_string_fid(client, monkeypatch):
    use_profile(monkeypatch, NeynarUser(fid=9, custody_address=ADDRESS, follower_count=100))
    r = await client.post("/api/counter/generate-signature", json={"userAddress": ADDRESS, "fid": "9"})
    assert r.status_code == 200


async def test_update_survives_cache_invalidation_failure(client, monkeypatch):
    async def redis_down():
        raise ConnectionError("redis unavailable")

    monkeypatch.setattr(cache, "invalidate_leaderboard_cache", redis_down)
    r = await client.post("/api/counter/update-leaderboard", json=entry(1, 5))
    assert r.status_code == 200
    assert r.json() == {"success": True}

    r = await client.get("/api/counter/leaderboard")
    assert r.json()["leaderboard"][0]["fid"] == 1
