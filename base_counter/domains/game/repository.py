# base_counter/domains/game/repository.py
from typing import Dict, List, Optional

from sqlalchemy import desc, func, select, update

from base_counter.core.database import session_scope
from base_counter.domains.game import logic
from base_counter.domains.game.models import GameScore
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


async def get_player(fid: int) -> Optional[GameScore]:
    async with session_scope() as db:
        return await db.get(GameScore, fid)


async def get_player_by_address(user_address: str) -> Optional[GameScore]:
    async with session_scope() as db:
        result = await db.execute(
            select(GameScore)
            .filter(func.lower(GameScore.user_address) == user_address.lower())
            .limit(1)
        )
        return result.scalar_one_or_none()


async def save_game_score(submission: Dict) -> GameScore:
    """Insert a new player or merge a game result into the existing record."""
    today = submission["played_at"].date()
    async with session_scope() as db:
        player = await db.get(GameScore, submission["fid"])
        if player is None:
            player = GameScore(
                fid=submission["fid"],
                pfp_url=submission.get("pfp_url") or "",
                username=submission.get("username"),
                user_address=submission.get("user_address"),
                score=submission["score"],
                current_season_score=submission["score"],
                level=submission.get("level", 0),
                duration=submission.get("duration"),
                last_game_at=submission["played_at"],
                daily_streak=1,
                longest_streak=1,
                last_play_date=today.isoformat(),
                nft_count=0,
                has_nft=False,
                faucet_claimed=False,
                has_minted_today=False,
                gift_box_claims_in_period=0,
                total_rewards_claimed=0,
            )
            db.add(player)
            logger.info(f"Created new player {player.fid} with score: {player.score}, streak: 1")
            return player

        previous_ath = player.score or 0
        previous_season = player.current_season_score or 0
        for field, value in logic.score_update(player, submission, today).items():
            setattr(player, field, value)

        if submission["score"] > previous_ath:
            logger.info(f"Updated player {player.fid} with new ATH: {submission['score']}, streak: {player.daily_streak}")
        elif submission["score"] > previous_season:
            logger.info(f"Updated player {player.fid} with new season score: {submission['score']}, streak: {player.daily_streak}")
        else:
            logger.info(f"Updated player {player.fid} profile info, streak: {player.daily_streak}")
        return player


async def get_season_leaderboard(limit: int = 50, offset: int = 0) -> List[GameScore]:
    async with session_scope() as db:
        result = await db.execute(
            select(GameScore)
            .filter(GameScore.current_season_score.is_not(None))
            .order_by(desc(GameScore.current_season_score))
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())


async def get_all_time_high_leaderboard(limit: int = 50, offset: int = 0) -> List[GameScore]:
    async with session_scope() as db:
        result = await db.execute(
            select(GameScore)
            .filter(GameScore.score > 0)
            .order_by(desc(GameScore.score))
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())


async def get_nft_leaderboard(limit: int = 50, offset: int = 0) -> List[GameScore]:
    async with session_scope() as db:
        result = await db.execute(
            select(GameScore)
            .filter(GameScore.has_nft.is_(True))
            .order_by(desc(GameScore.score))
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())


async def get_season_players() -> List[GameScore]:
    async with session_scope() as db:
        result = await db.execute(
            select(GameScore).filter(GameScore.current_season_score.is_not(None))
        )
        return list(result.scalars().all())


async def count_season_players() -> int:
    async with session_scope() as db:
        result = await db.execute(
            select(func.count()).select_from(GameScore).filter(GameScore.current_season_score.is_not(None))
        )
        return result.scalar_one()


async def count_ath_players() -> int:
    async with session_scope() as db:
        result = await db.execute(
            select(func.count()).select_from(GameScore).filter(GameScore.score > 0)
        )
        return result.scalar_one()


async def count_nft_players() -> int:
    async with session_scope() as db:
        result = await db.execute(
            select(func.count()).select_from(GameScore).filter(GameScore.has_nft.is_(True))
        )
        return result.scalar_one()


async def increment_nft_count(fid: int) -> GameScore:
    async with session_scope() as db:
        player = await db.get(GameScore, fid)
        if player is None:
            player = GameScore(fid=fid, pfp_url="", nft_count=0)
            db.add(player)
        player.nft_count = (player.nft_count or 0) + 1
        player.last_nft_mint_at = utcnow()
        return player


async def update_nft_info(fid: int, nft_name: str) -> GameScore:
    async with session_scope() as db:
        player = await db.get(GameScore, fid)
        if player is None:
            player = GameScore(fid=fid, pfp_url="")
            db.add(player)
        player.nft_name = nft_name
        player.has_nft = True
        player.last_nft_mint_at = utcnow()
        return player


async def set_daily_mint_status(user_address: str, has_minted: bool, mint_date: str) -> int:
    async with session_scope() as db:
        result = await db.execute(
            update(GameScore)
            .where(func.lower(GameScore.user_address) == user_address.lower())
            .values(has_minted_today=has_minted, last_mint_date=mint_date, updated_at=utcnow())
        )
        return result.rowcount or 0


async def reset_daily_mint_status() -> int:
    async with session_scope() as db:
        result = await db.execute(
            update(GameScore)
            .where(GameScore.has_minted_today.is_(True))
            .values(has_minted_today=False, updated_at=utcnow())
        )
        return result.rowcount or 0


async def mark_faucet_claimed(user_address: str) -> int:
    async with session_scope() as db:
        result = await db.execute(
            update(GameScore)
            .where(func.lower(GameScore.user_address) == user_address.lower())
            .values(faucet_claimed=True, updated_at=utcnow())
        )
        return result.rowcount or 0


async def backfill_season_scores() -> int:
    async with session_scope() as db:
        result = await db.execute(
            update(GameScore)
            .where(GameScore.current_season_score.is_(None))
            .values(current_season_score=func.coalesce(GameScore.score, 0))
        )
        return result.rowcount or 0
