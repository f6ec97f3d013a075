# base_counter/domains/mints/models.py
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class UserMint(Base, TimestampMixin):
    __tablename__ = "user_mints"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_address: Mapped[str] = mapped_column(String, index=True)
    score: Mapped[int] = mapped_column(Integer, default=0, index=True)
    token_id: Mapped[int] = mapped_column(Integer, nullable=True)
    trait: Mapped[str] = mapped_column(String, nullable=True)
    signature: Mapped[str] = mapped_column(Text)
    minted_at: Mapped[datetime] = mapped_column(DateTime, index=True)


class DailyMintCount(Base, TimestampMixin):
    __tablename__ = "daily_mint_counts"
    __table_args__ = (UniqueConstraint("user_address", "date", name="uq_daily_mint_address_date"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_address: Mapped[str] = mapped_column(String, index=True)
    date: Mapped[str] = mapped_column(String(10))
    count: Mapped[int] = mapped_column(Integer, default=0)
    last_mint_at: Mapped[datetime] = mapped_column(DateTime)
