"""Copy each player's all-time high into the season score where it is missing"""
import asyncio
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from base_counter.domains.game.service import game_service
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


async def main():
    migrated = await game_service.migrate_season_scores()
    logger.info(f"Season score migration finished: {migrated} players updated")


if __name__ == "__main__":
    asyncio.run(main())
