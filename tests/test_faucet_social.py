import pytest

from base_counter.domains.faucet.service import DuplicateFaucetClaim, faucet_service
from base_counter.domains.game import repository as game_repository
from base_counter.domains.game.service import game_service
from base_counter.domains.social.service import social_service

ADDRESS = "0xAbCdEf0000000000000000000000000000000001"
TX = "0x" + "ab" * 32


def claim(tx=TX, wallet_index=1, amount="0.0001"):
    return {
        "user_address": ADDRESS,
        "amount": amount,
        "transaction_hash": tx,
        "block_number": 123,
        "wallet_index": wallet_index,
    }


async def test_faucet_claim_marks_player(db):
    await game_service.submit_score({"fid": 1, "score": 5, "user_address": ADDRESS})
    assert not await faucet_service.has_user_claimed(ADDRESS)

    await faucet_service.record_claim(claim())
    assert await faucet_service.has_user_claimed(ADDRESS.lower())
    assert (await game_repository.get_player(1)).faucet_claimed is True


async def test_faucet_duplicate_transaction(db):
    await faucet_service.record_claim(claim())
    with pytest.raises(DuplicateFaucetClaim):
        await faucet_service.record_claim(claim())


async def test_wallet_usage_grouped(db):
    await faucet_service.record_claim(claim("0x" + "01" * 32, 1, "0.0001"))
    await faucet_service.record_claim(claim("0x" + "02" * 32, 1, "0.0002"))
    await faucet_service.record_claim(claim("0x" + "03" * 32, 2, "0.0001"))

    usage = await faucet_service.get_wallet_usage_stats()
    assert usage == [
        {"wallet_index": 1, "usage_count": 2, "total_amount": "0.0003"},
        {"wallet_index": 2, "usage_count": 1, "total_amount": "0.0001"},
    ]


async def test_faucet_endpoints(client, auth_headers):
    body = {"userAddress": ADDRESS, "amount": "0.0001", "transactionHash": TX, "blockNumber": 9, "walletIndex": 2}
    r = await client.post("/api/faucet/claims", json=body, headers=auth_headers())
    assert r.status_code == 200

    r = await client.post("/api/faucet/claims", json=body, headers=auth_headers())
    assert r.status_code == 409

    r = await client.get(f"/api/faucet/{ADDRESS}")
    assert r.json()["hasClaimed"] is True
    assert r.json()["claim"]["walletIndex"] == 2

    r = await client.get("/api/faucet/wallets/usage")
    assert r.json()["wallets"][0]["usageCount"] == 1


async def test_follow_is_idempotent(db):
    first = await social_service.save_follow_action({"user_address": ADDRESS, "fid": 1, "platform": "twitter"})
    second = await social_service.save_follow_action({"user_address": ADDRESS, "platform": "x"})
    assert first.id == second.id
    assert first.platform == "x"
    assert await social_service.has_user_followed(ADDRESS.lower())


async def test_follow_unknown_platform(client):
    r = await client.get(f"/api/social/follows/{ADDRESS}?platform=myspace")
    assert r.status_code == 400
    assert r.json()["error"] == "Unsupported platform: myspace"
