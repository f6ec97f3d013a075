# base_counter/domains/social_graph/models.py
from datetime import datetime

from sqlalchemy import JSON, BigInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class CachedUser(Base, TimestampMixin):
    """Neynar profile snapshot, trusted for USER_CACHE_TTL_SECONDS."""

    __tablename__ = "counter_users"

    fid: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    user_data: Mapped[dict] = mapped_column(JSON)
    cached_at: Mapped[datetime] = mapped_column(DateTime, index=True)
