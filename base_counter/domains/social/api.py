from fastapi import APIRouter, HTTPException, Query

from base_counter.domains.social.schemas import FollowActionOut, FollowRequest, FollowStatusOut
from base_counter.domains.social.service import normalize_platform, social_service

router = APIRouter()


@router.get("/follows/{user_address}", response_model=FollowStatusOut)
async def get_follow_status(user_address: str, platform: str = Query(default="x")):
    try:
        platform = normalize_platform(platform)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    followed = await social_service.has_user_followed(user_address, platform)
    return FollowStatusOut(has_followed=followed, platform=platform)


@router.post("/follows", response_model=FollowActionOut)
async def record_follow(request: FollowRequest):
    try:
        action = await social_service.save_follow_action(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FollowActionOut.model_validate(action)
