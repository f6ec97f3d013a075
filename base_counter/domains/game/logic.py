# base_counter/domains/game/logic.py
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence


def compute_streak(last_play_date: Optional[str], current_streak: int, today: date) -> int:
    """Same day keeps the streak, the next day extends it, anything else restarts it."""
    if not last_play_date:
        return 1
    if last_play_date == today.isoformat():
        return current_streak or 1
    if last_play_date == (today - timedelta(days=1)).isoformat():
        return (current_streak or 0) + 1
    return 1


def score_update(existing, submission: Dict, today: date) -> Dict:
    """
    Fields to write for a returning player.

    Scores and level only ever go up; duration follows the season high;
    profile fields always follow the latest submission.
    """
    new_score = submission["score"]
    current_ath = existing.score or 0
    current_season = existing.current_season_score or 0

    streak = compute_streak(existing.last_play_date, existing.daily_streak or 0, today)
    changes = {
        "pfp_url": submission.get("pfp_url") or "",
        "username": submission.get("username"),
        "last_game_at": submission["played_at"],
        "daily_streak": streak,
        "last_play_date": today.isoformat(),
        "longest_streak": max(existing.longest_streak or 0, streak),
    }

    if new_score > current_season:
        changes["current_season_score"] = new_score
        if submission.get("duration") is not None:
            changes["duration"] = submission["duration"]

    if new_score > current_ath:
        changes["score"] = new_score

    if submission.get("level", 0) > (existing.level or 0):
        changes["level"] = submission["level"]

    if submission.get("user_address"):
        changes["user_address"] = submission["user_address"]

    return changes


def season_score(player) -> int:
    return player.current_season_score or 0


def is_nft_holder(player) -> bool:
    return bool(player.has_nft) and (player.nft_count or 0) > 0


def mix_leaderboard(players: Sequence, nft_slots: int = 10) -> List:
    """Top `nft_slots` NFT holders first, then everyone else by season score."""
    ordered = sorted(players, key=season_score, reverse=True)
    holders = [p for p in ordered if is_nft_holder(p)]
    featured = holders[:nft_slots]
    featured_fids = {p.fid for p in featured}
    others = [p for p in ordered if p.fid not in featured_fids]
    return featured + others
