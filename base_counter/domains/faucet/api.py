from fastapi import APIRouter, HTTPException

from base_counter.domains.faucet.schemas import (
    FaucetClaimOut,
    FaucetStatusOut,
    RecordFaucetClaimRequest,
    WalletUsageOut,
    WalletUsageResponse,
)
from base_counter.domains.faucet.service import DuplicateFaucetClaim, faucet_service

router = APIRouter()


@router.get("/wallets/usage", response_model=WalletUsageResponse)
async def get_wallet_usage():
    stats = await faucet_service.get_wallet_usage_stats()
    return WalletUsageResponse(wallets=[WalletUsageOut(**s) for s in stats])


@router.post("/claims", response_model=FaucetClaimOut)
async def record_claim(request: RecordFaucetClaimRequest):
    """Record a faucet payout sent on-chain"""
    try:
        claim = await faucet_service.record_claim(request.model_dump())
    except DuplicateFaucetClaim as e:
        raise HTTPException(status_code=409, detail=str(e))
    return FaucetClaimOut.model_validate(claim)


@router.get("/{user_address}", response_model=FaucetStatusOut)
async def get_faucet_status(user_address: str):
    claim = await faucet_service.get_claim(user_address)
    return FaucetStatusOut(
        has_claimed=await faucet_service.has_user_claimed(user_address),
        claim=FaucetClaimOut.model_validate(claim) if claim else None,
    )
