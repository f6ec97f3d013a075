from typing import Optional

from asgiref.sync import async_to_sync

from base_counter.core.celery import celery_app
from base_counter.domains.auth.service import cleanup_old_auth_keys


@celery_app.task
def cleanup_used_auth_keys(max_age_hours: Optional[int] = None):
    return async_to_sync(cleanup_old_auth_keys)(max_age_hours)
