from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from base_counter.domains.counter.schemas import (
    GenerateSignatureRequest,
    GenerateSignatureResponse,
    LeaderboardEntryOut,
    LeaderboardResponse,
    UpdateLeaderboardRequest,
)
from base_counter.domains.counter.service import counter_service
from base_counter.shared.errors import CounterError
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


router = APIRouter()


def _coerce_fid(value) -> Optional[int]:
    try:
        fid = int(value)
    except (TypeError, ValueError):
        return None
    return fid if fid > 0 else None


@router.post("/generate-signature", response_model=GenerateSignatureResponse)
async def generate_signature(request: GenerateSignatureRequest):
    """Sign a lever-pull reward for a verified address/FID pair"""
    fid = _coerce_fid(request.fid)
    if not request.user_address or not fid:
        raise HTTPException(status_code=400, detail="Missing userAddress or fid")

    try:
        result = await counter_service.generate_signature(request.user_address, fid)
    except CounterError:
        raise
    except Exception as e:
        logger.error(f"Error generating counter signature: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate signature")
    return GenerateSignatureResponse(**result)


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(limit: int = Query(default=100, ge=1, le=1000)):
    """Top users by total increments"""
    try:
        entries = await counter_service.get_leaderboard(limit)
    except Exception as e:
        logger.error(f"Error fetching leaderboard: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch leaderboard")
    return LeaderboardResponse(leaderboard=[LeaderboardEntryOut(**entry) for entry in entries])


@router.post("/update-leaderboard")
async def update_leaderboard(request: UpdateLeaderboardRequest):
    """Upsert the caller's aggregate stats"""
    if not request.fid or not request.username or not request.user_address:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        await counter_service.update_leaderboard(request.model_dump())
    except Exception as e:
        logger.error(f"Error updating leaderboard: {e}")
        raise HTTPException(status_code=500, detail="Failed to update leaderboard")
    return {"success": True}
