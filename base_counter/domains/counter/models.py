# base_counter/domains/counter/models.py
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class LeaderboardEntry(Base, TimestampMixin):
    __tablename__ = "counter_leaderboard"

    fid: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    username: Mapped[str] = mapped_column(String)
    image_url: Mapped[str] = mapped_column(String, default="")
    user_address: Mapped[str] = mapped_column(String, index=True)
    total_increments: Mapped[int] = mapped_column(Integer, default=0, index=True)
    total_rewards: Mapped[float] = mapped_column(Float, default=0.0)
    last_update_at: Mapped[datetime] = mapped_column(DateTime)
