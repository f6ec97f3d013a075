# base_counter/domains/auth/service.py
from datetime import timedelta

from base_counter.core.config import settings
from base_counter.domains.auth import repository
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.security import is_valid_fused_key
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


async def validate_auth_key(fused_key: str, random_string: str, ip_address: str = "unknown") -> bool:
    """Accept a fused key once: it must match the secret and never have been seen."""
    fused_key = (fused_key or "").lower().removeprefix("0x")
    if not is_valid_fused_key(fused_key, random_string):
        logger.warning(f"Rejected fused key with bad signature from {ip_address}")
        return False

    if await repository.is_auth_key_used(fused_key):
        logger.warning(f"Rejected replayed fused key from {ip_address}")
        return False

    stored = await repository.store_used_auth_key(fused_key, random_string, ip_address)
    if not stored:
        logger.warning(f"Rejected concurrently replayed fused key from {ip_address}")
    return stored


async def cleanup_old_auth_keys(max_age_hours: int | None = None) -> int:
    hours = settings.AUTH_KEY_MAX_AGE_HOURS if max_age_hours is None else max_age_hours
    removed = await repository.delete_auth_keys_before(utcnow() - timedelta(hours=hours))
    logger.info(f"Removed {removed} used auth keys older than {hours}h")
    return removed
