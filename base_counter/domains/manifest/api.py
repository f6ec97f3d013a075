from fastapi import APIRouter

from base_counter.core.config import settings

router = APIRouter()


def build_manifest() -> dict:
    app_url = settings.APP_URL.rstrip("/")
    return {
        "accountAssociation": {
            "header": settings.ACCOUNT_ASSOCIATION_HEADER,
            "payload": settings.ACCOUNT_ASSOCIATION_PAYLOAD,
            "signature": settings.ACCOUNT_ASSOCIATION_SIGNATURE,
        },
        "frame": {
            "version": "1",
            "name": settings.APP_NAME,
            "iconUrl": f"{app_url}/images/icon.jpg",
            "homeUrl": app_url,
            "imageUrl": f"{app_url}/images/feed.jpg",
            "screenshotUrls": [],
            "tags": settings.APP_TAGS,
            "primaryCategory": "games",
            "buttonTitle": settings.APP_BUTTON_TITLE,
            "splashImageUrl": f"{app_url}/images/splash.jpg",
            "splashBackgroundColor": settings.APP_SPLASH_BACKGROUND_COLOR,
            "webhookUrl": f"{app_url}/api/webhook",
        },
    }


@router.get("/farcaster.json")
async def farcaster_manifest():
    """Mini app discovery document"""
    return build_manifest()
