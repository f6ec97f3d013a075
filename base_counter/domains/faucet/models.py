# base_counter/domains/faucet/models.py
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class FaucetClaim(Base, TimestampMixin):
    __tablename__ = "faucet_claims"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_address: Mapped[str] = mapped_column(String, index=True)
    amount: Mapped[str] = mapped_column(String)  # decimal string, token units are chain specific
    transaction_hash: Mapped[str] = mapped_column(String, unique=True)
    block_number: Mapped[int] = mapped_column(BigInteger)
    wallet_index: Mapped[int] = mapped_column(Integer, nullable=True, index=True)
    claimed_at: Mapped[datetime] = mapped_column(DateTime)
