# base_counter/domains/gift_box/models.py
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class GiftBoxClaim(Base, TimestampMixin):
    __tablename__ = "gift_box_claims"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_address: Mapped[str] = mapped_column(String, index=True)
    fid: Mapped[int] = mapped_column(BigInteger, index=True)
    token_type: Mapped[str] = mapped_column(String)  # usdc, pepe, crsh, boop, none
    amount: Mapped[float] = mapped_column(Float)
    amount_units: Mapped[str] = mapped_column(String, default="0")
    signature: Mapped[str] = mapped_column(Text, nullable=True)
    transaction_hash: Mapped[str] = mapped_column(String, nullable=True)
    claimed_at: Mapped[datetime] = mapped_column(DateTime, index=True)
