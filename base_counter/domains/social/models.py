# base_counter/domains/social/models.py
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class FollowAction(Base, TimestampMixin):
    __tablename__ = "follow_actions"
    __table_args__ = (UniqueConstraint("user_address", "platform", name="uq_follow_address_platform"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_address: Mapped[str] = mapped_column(String, index=True)
    fid: Mapped[int] = mapped_column(Integer, nullable=True)
    platform: Mapped[str] = mapped_column(String(16), default="x")
    reward_claimed: Mapped[bool] = mapped_column(Boolean, default=False)
    followed_at: Mapped[datetime] = mapped_column(DateTime)
