from .club_stats import compute_club_stats
from .models import Club, ClubShot, ClubStats, HoleScore, PlayerRoundStats, RoundStats
from .stats import (
    compute_player_round_stats,
    compute_round_stats,
    with_hole_strokes_gained,
)

__all__ = [
    "Club",
    "ClubShot",
    "ClubStats",
    "HoleScore",
    "PlayerRoundStats",
    "RoundStats",
    "compute_club_stats",
    "compute_player_round_stats",
    "compute_round_stats",
    "with_hole_strokes_gained",
]
