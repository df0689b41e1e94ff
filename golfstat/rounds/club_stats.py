from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from .models import Club, ClubDispersion, ClubShot, ClubStats

DIRECTIONS = ("left", "center", "right", "long", "short", "target")

PUTTER_TYPE = "putter"
# Putter outcomes are regrouped; anything not listed counts as "bad".
PUTT_OUTCOME_GROUPS = {
    "hole": "holed",
    "green": "acceptable",
    "fairway": "acceptable",
}


def _percent(count: int, total: int) -> float:
    return count / total * 100 if total else 0.0


def _putter_outcomes(outcomes: Counter) -> Counter:
    grouped: Counter = Counter({"holed": 0, "acceptable": 0, "bad": 0})
    for outcome, count in outcomes.items():
        grouped[PUTT_OUTCOME_GROUPS.get(outcome, "bad")] += count
    return grouped


def _club_stats(club: Club, shots: Sequence[ClubShot]) -> ClubStats:
    total = len(shots)
    distances = [s.shot_distance for s in shots if s.shot_distance]
    directions = Counter(s.direction for s in shots if s.direction in DIRECTIONS)
    outcomes = Counter(s.outcome for s in shots if s.outcome)
    if club.club_type.lower() == PUTTER_TYPE:
        outcomes = _putter_outcomes(outcomes)

    return ClubStats(
        club_id=club.id,
        club_name=club.name,
        club_type=club.club_type,
        total_shots=total,
        average_distance=sum(distances) / len(distances) if distances else 0.0,
        min_distance=min(distances, default=0.0),
        max_distance=max(distances, default=0.0),
        accuracy=_percent(sum(1 for s in shots if s.successful_strike), total),
        dispersion=ClubDispersion(
            **{name: _percent(directions[name], total) for name in DIRECTIONS}
        ),
        outcomes={name: _percent(count, total) for name, count in outcomes.items()},
    )


def compute_club_stats(
    shots: Iterable[ClubShot], clubs: Iterable[Club]
) -> list[ClubStats]:
    """Per-club shot summary, one entry per club in ``clubs`` order.

    Shots without a club, or for a club not in ``clubs``, are ignored.
    Distance figures only use shots with a recorded distance; accuracy,
    dispersion and outcome shares are percentages of all the club's shots.
    """

    club_list = list(clubs)
    by_club: dict[int, list[ClubShot]] = {club.id: [] for club in club_list}
    for shot in shots:
        if shot.club_id in by_club:
            by_club[shot.club_id].append(shot)
    return [_club_stats(club, by_club[club.id]) for club in club_list]


__all__ = ["DIRECTIONS", "compute_club_stats"]
