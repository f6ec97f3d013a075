from fastapi import APIRouter, Query

from base_counter.domains.gift_box.schemas import (
    ClaimGiftBoxRequest,
    GiftBoxClaimOut,
    GiftBoxStatsOut,
    GiftBoxStatusOut,
)
from base_counter.domains.gift_box.service import gift_box_service

router = APIRouter()


@router.get("/status", response_model=GiftBoxStatusOut)
async def get_status(fid: int = Query(gt=0)):
    """Whether the gift box should be shown and can be claimed"""
    window = await gift_box_service.get_window(fid)
    return GiftBoxStatusOut(
        can_see=window.can_claim,
        can_claim=window.can_claim,
        claims_today=window.claims_today,
        remaining_claims=window.remaining_claims,
        last_claim_time=window.last_claim_at,
    )


@router.post("/claim", response_model=GiftBoxClaimOut)
async def claim_gift_box(request: ClaimGiftBoxRequest):
    result = await gift_box_service.claim(request.user_address, request.fid)
    return GiftBoxClaimOut(**result)


@router.get("/stats", response_model=GiftBoxStatsOut)
async def get_stats(address: str, fid: int = Query(gt=0)):
    return GiftBoxStatsOut(**await gift_box_service.get_stats(address, fid))
