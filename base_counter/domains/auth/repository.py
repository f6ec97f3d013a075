# base_counter/domains/auth/repository.py
import uuid
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from base_counter.core.database import session_scope
from base_counter.domains.auth.models import UsedAuthKey
from base_counter.shared.utils.time import utcnow


async def is_auth_key_used(fused_key: str) -> bool:
    async with session_scope() as db:
        result = await db.execute(
            select(UsedAuthKey.id).filter(UsedAuthKey.fused_key == fused_key)
        )
        return result.scalar_one_or_none() is not None


async def store_used_auth_key(fused_key: str, random_string: str, ip_address: str) -> bool:
    """Record a key; False if another request stored it first."""
    try:
        async with session_scope() as db:
            db.add(
                UsedAuthKey(
                    id=str(uuid.uuid4()),
                    fused_key=fused_key,
                    random_string=random_string,
                    ip_address=ip_address,
                    used_at=utcnow(),
                )
            )
        return True
    except IntegrityError:
        return False


async def delete_auth_keys_before(cutoff: datetime) -> int:
    async with session_scope() as db:
        result = await db.execute(delete(UsedAuthKey).where(UsedAuthKey.used_at < cutoff))
        return result.rowcount or 0
