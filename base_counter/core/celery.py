# base_counter/core/celery.py
from celery import Celery
from celery.schedules import crontab

from base_counter.core.config import settings

celery_app = Celery(
    "base_counter_tasks",
    broker=settings.RABBITMQ_URL,
    backend=settings.REDIS_URL,
    include=[
        "base_counter.tasks.cleanup",
        "base_counter.tasks.mint_tasks",
    ],
)


def init_celery():
    celery_app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        worker_send_task_events=True,
        broker_connection_retry_on_startup=True,
        task_track_started=True,
    )


async def check_connection() -> bool:
    try:
        with celery_app.connection_or_acquire() as conn:
            conn.heartbeat_check()
            return True
    except Exception:
        return False


celery_app.conf.beat_schedule = {
    "cleanup-used-auth-keys": {
        "task": "base_counter.tasks.cleanup.cleanup_used_auth_keys",
        "schedule": crontab(minute=0),
    },
    "reset-daily-mint-status": {
        "task": "base_counter.tasks.mint_tasks.reset_daily_mint_status",
        "schedule": crontab(hour=0, minute=0),
    },
}
