from asgiref.sync import async_to_sync

from base_counter.core.celery import celery_app
from base_counter.domains.mints.service import mint_service


@celery_app.task
def reset_daily_mint_status():
    """Clear the per-player "minted today" flag at the start of each UTC day."""
    return async_to_sync(mint_service.reset_daily_mint_status)()
