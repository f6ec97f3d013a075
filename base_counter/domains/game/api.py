from fastapi import APIRouter, HTTPException, Query

from base_counter.domains.game.schemas import (
    LeaderboardKind,
    LeaderboardOut,
    NftInfoRequest,
    PlayerOut,
    StreakOut,
    SubmitScoreRequest,
)
from base_counter.domains.game.service import game_service

router = APIRouter()


@router.post("/scores", response_model=PlayerOut)
async def submit_score(request: SubmitScoreRequest):
    """Record a finished game"""
    player = await game_service.submit_score(request.model_dump())
    return PlayerOut.model_validate(player)


@router.get("/leaderboard", response_model=LeaderboardOut)
async def get_leaderboard(
    board: LeaderboardKind = LeaderboardKind.SEASON,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
):
    players, total = await game_service.get_leaderboard(board, limit, offset)
    return LeaderboardOut(
        board=board,
        total=total,
        players=[PlayerOut.model_validate(p) for p in players],
    )


@router.get("/players/{fid}", response_model=PlayerOut)
async def get_player(fid: int):
    player = await game_service.get_player(fid)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerOut.model_validate(player)


@router.get("/players/{fid}/streak", response_model=StreakOut)
async def get_streak(fid: int):
    streak = await game_service.get_user_streak(fid)
    if streak is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return StreakOut(**streak)


@router.post("/players/{fid}/nft", response_model=PlayerOut)
async def record_nft(fid: int, request: NftInfoRequest):
    """Mark an NFT mint for the player"""
    player = await game_service.record_nft_mint(fid, request.nft_name)
    return PlayerOut.model_validate(player)
