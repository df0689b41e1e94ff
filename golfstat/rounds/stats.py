from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Optional, Sequence

from golfstat.sg.schemas import RoundSG

from .models import HoleScore, PlayerRoundStats, RoundStats

FAIRWAY_MIN_PAR = 4


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def fairway_percentage(fairways_hit: int, fairways_total: int) -> int:
    if fairways_total == 0:
        return 0
    return int(_round_half_up(fairways_hit / fairways_total * 100))


def gir_percentage(gir: int, holes: int) -> int:
    if holes == 0:
        return 0
    return int(_round_half_up(gir / holes * 100))


def average_putts(total_putts: int, holes: int) -> float:
    if holes == 0:
        return 0.0
    return _round_half_up(total_putts / holes, 1)


def format_relative_score(score: Optional[int]) -> str:
    if score is None:
        return "N/A"
    if score == 0:
        return "E"
    return f"+{score}" if score > 0 else str(score)


def format_strokes_gained(value: Optional[float]) -> str:
    if value is None:
        return "0.0"
    return f"+{value:.1f}" if value > 0 else f"{value:.1f}"


def compute_round_stats(
    holes: Iterable[HoleScore], *, played_on: date | None = None
) -> RoundStats:
    """Derive the scorecard summary for a round from its hole records."""

    hole_list = list(holes)
    scored = [h for h in hole_list if h.score is not None]
    with_putts = [h for h in hole_list if h.num_putts is not None]
    fairway_holes = [h for h in hole_list if h.par >= FAIRWAY_MIN_PAR]
    sg_values = [h.strokes_gained for h in hole_list if h.strokes_gained is not None]

    total_score = sum(h.score or 0 for h in scored) if scored else None
    total_par = sum(h.par for h in scored) if scored else None
    relative = (
        total_score - total_par
        if total_score is not None and total_par is not None
        else None
    )
    total_putts = sum(h.num_putts or 0 for h in with_putts)

    return RoundStats(
        played_on=played_on,
        holes_played=len(hole_list),
        total_score=total_score,
        total_par=total_par,
        relative_to_par=relative,
        fairways_hit=sum(1 for h in fairway_holes if h.fairway_hit),
        fairways_total=len(fairway_holes),
        greens_in_regulation=sum(1 for h in hole_list if h.green_in_regulation),
        total_putts=total_putts,
        putt_holes=len(with_putts),
        putts_per_hole=(
            average_putts(total_putts, len(with_putts)) if with_putts else None
        ),
        up_and_downs=sum(1 for h in hole_list if h.up_and_down),
        sand_saves=sum(1 for h in hole_list if h.sand_save),
        penalties=sum(h.num_penalties or 0 for h in hole_list),
        strokes_gained=sum(sg_values) if sg_values else None,
    )


def with_hole_strokes_gained(
    holes: Sequence[HoleScore], round_sg: RoundSG
) -> list[HoleScore]:
    """Copy ``holes`` with ``strokes_gained`` filled from the round result."""

    by_hole = {hole.hole: hole.sg_total for hole in round_sg.holes}
    return [
        hole.model_copy(update={"strokes_gained": by_hole[hole.hole_number]})
        if hole.hole_number in by_hole
        else hole
        for hole in holes
    ]


def compute_player_round_stats(rounds: Sequence[RoundStats]) -> PlayerRoundStats:
    rounds_count = len(rounds)
    if not rounds_count:
        return PlayerRoundStats(rounds_count=0)

    scored = [r.total_score for r in rounds if r.total_score is not None]
    average_score = (
        _round_half_up(sum(scored) / len(scored), 1) if scored else None
    )
    putt_holes = sum(r.putt_holes for r in rounds)

    return PlayerRoundStats(
        rounds_count=rounds_count,
        average_score=average_score,
        fairway_pct=fairway_percentage(
            sum(r.fairways_hit for r in rounds), sum(r.fairways_total for r in rounds)
        ),
        gir_pct=gir_percentage(
            sum(r.greens_in_regulation for r in rounds),
            sum(r.holes_played for r in rounds),
        ),
        putts_per_hole=average_putts(sum(r.total_putts for r in rounds), putt_holes),
    )


__all__ = [
    "average_putts",
    "compute_player_round_stats",
    "compute_round_stats",
    "fairway_percentage",
    "format_relative_score",
    "format_strokes_gained",
    "gir_percentage",
    "with_hole_strokes_gained",
]
