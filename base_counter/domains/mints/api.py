from typing import List

from fastapi import APIRouter, Query

from base_counter.domains.mints.schemas import MintOut, MintStatsOut, MintStatusOut, RecordMintRequest
from base_counter.domains.mints.service import mint_service

router = APIRouter()


@router.get("/stats", response_model=MintStatsOut)
async def get_mint_stats(top: int = Query(default=10, ge=1, le=100)):
    return MintStatsOut(**await mint_service.get_stats(top))


@router.get("/{user_address}/status", response_model=MintStatusOut)
async def get_mint_status(user_address: str):
    return MintStatusOut(**await mint_service.get_status(user_address))


@router.get("/{user_address}/history", response_model=List[MintOut])
async def get_mint_history(user_address: str, limit: int = Query(default=50, ge=1, le=200)):
    mints = await mint_service.get_mint_history(user_address, limit)
    return [MintOut.model_validate(m) for m in mints]


@router.post("", response_model=MintOut)
async def record_mint(request: RecordMintRequest):
    """Record a completed NFT mint (limited per day)"""
    mint = await mint_service.record_mint(request.model_dump())
    return MintOut.model_validate(mint)
