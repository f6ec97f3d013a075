# base_counter/domains/game/models.py
from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class GameScore(Base, TimestampMixin):
    __tablename__ = "game_scores"

    fid: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    pfp_url: Mapped[str] = mapped_column(String, default="")
    username: Mapped[str] = mapped_column(String, nullable=True)
    user_address: Mapped[str] = mapped_column(String, nullable=True, index=True)

    # Scores: `score` is the all-time high, only replaced when beaten
    score: Mapped[int] = mapped_column(Integer, default=0, index=True)
    current_season_score: Mapped[int] = mapped_column(Integer, nullable=True, index=True)
    level: Mapped[int] = mapped_column(Integer, default=0)
    duration: Mapped[int] = mapped_column(Integer, nullable=True)
    last_game_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)

    # NFT tracking
    nft_name: Mapped[str] = mapped_column(String, nullable=True)
    nft_count: Mapped[int] = mapped_column(Integer, default=0)
    has_nft: Mapped[bool] = mapped_column(Boolean, default=False)
    last_nft_mint_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)

    # Faucet / mints
    faucet_claimed: Mapped[bool] = mapped_column(Boolean, default=False)
    has_minted_today: Mapped[bool] = mapped_column(Boolean, default=False)
    last_mint_date: Mapped[str] = mapped_column(String(10), nullable=True)

    # Daily streak, dates as YYYY-MM-DD
    daily_streak: Mapped[int] = mapped_column(Integer, default=0)
    last_play_date: Mapped[str] = mapped_column(String(10), nullable=True)
    longest_streak: Mapped[int] = mapped_column(Integer, default=0)

    # Gift box rolling window
    gift_box_claims_in_period: Mapped[int] = mapped_column(Integer, default=0)
    last_gift_box_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)
    total_rewards_claimed: Mapped[int] = mapped_column(Integer, default=0)
