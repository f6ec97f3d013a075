# base_counter/domains/game/service.py
from typing import Dict, List, Optional, Tuple

from base_counter.domains.game import logic, repository
from base_counter.domains.game.models import GameScore
from base_counter.domains.game.schemas import LeaderboardKind
from base_counter.shared.utils.logger import get_logger
from base_counter.shared.utils.time import utcnow

logger = get_logger(__name__)


class GameService:
    """Player score records, streaks and leaderboards"""

    nft_featured_slots = 10

    async def submit_score(self, submission: Dict) -> GameScore:
        submission = {**submission, "played_at": utcnow()}
        return await repository.save_game_score(submission)

    async def get_leaderboard(
        self, kind: LeaderboardKind, limit: int = 50, offset: int = 0
    ) -> Tuple[List[GameScore], int]:
        if kind == LeaderboardKind.ATH:
            players = await repository.get_all_time_high_leaderboard(limit, offset)
            return players, await repository.count_ath_players()
        if kind == LeaderboardKind.NFT:
            players = await repository.get_nft_leaderboard(limit, offset)
            return players, await repository.count_nft_players()
        if kind == LeaderboardKind.MIXED:
            everyone = await repository.get_season_players()
            mixed = logic.mix_leaderboard(everyone, self.nft_featured_slots)
            logger.debug(f"Mixed leaderboard offset={offset} limit={limit} total={len(mixed)}")
            return mixed[offset:offset + limit], len(mixed)
        players = await repository.get_season_leaderboard(limit, offset)
        return players, await repository.count_season_players()

    async def get_player(self, fid: int) -> Optional[GameScore]:
        return await repository.get_player(fid)

    async def get_user_best_score(self, fid: int) -> int:
        player = await repository.get_player(fid)
        return (player.score or 0) if player else 0

    async def get_user_streak(self, fid: int) -> Optional[Dict]:
        player = await repository.get_player(fid)
        if player is None:
            return None
        return {
            "daily_streak": player.daily_streak or 0,
            "longest_streak": player.longest_streak or 0,
            "last_play_date": player.last_play_date,
        }

    async def record_nft_mint(self, fid: int, nft_name: str) -> GameScore:
        await repository.update_nft_info(fid, nft_name)
        player = await repository.increment_nft_count(fid)
        logger.info(f"Player {fid} minted NFT {nft_name} (total {player.nft_count})")
        return player

    async def migrate_season_scores(self) -> int:
        migrated = await repository.backfill_season_scores()
        logger.info(f"Backfilled season score for {migrated} players")
        return migrated


game_service = GameService()
