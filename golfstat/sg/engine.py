"""Round and player strokes-gained aggregation."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from .estimator import shot_strokes_gained
from .schemas import (
    CATEGORIES,
    CATEGORY_BY_SHOT_TYPE,
    HoleSG,
    PlayerSGSummary,
    RoundSG,
    RoundShot,
    ShotSG,
)

T = TypeVar("T")


def _shot_sg(shot: RoundShot) -> ShotSG:
    return ShotSG(
        hole=shot.hole,
        shot=shot.shot,
        shot_type=shot.shot_type,
        category=CATEGORY_BY_SHOT_TYPE.get(shot.shot_type),
        sg_delta=shot_strokes_gained(shot),
    )


def compute_round_sg(
    shots: Iterable[RoundShot],
    *,
    round_id: str | None = None,
    played_on: date | None = None,
) -> RoundSG:
    """Compute per-shot, per-hole, per-category and total strokes gained."""

    source_shots = list(shots)
    resolved_round_id = round_id or next(
        (s.round_id for s in source_shots if s.round_id), ""
    )
    if not source_shots:
        return RoundSG(round_id=resolved_round_id, played_on=played_on)

    shot_results: List[ShotSG] = []
    hole_shots: dict[int, List[ShotSG]] = defaultdict(list)
    category_totals: dict[str, float] = {name: 0.0 for name in CATEGORIES}

    for shot in sorted(source_shots, key=lambda s: (s.hole, s.shot)):
        result = _shot_sg(shot)
        shot_results.append(result)
        hole_shots[shot.hole].append(result)
        if result.category is not None:
            category_totals[result.category] += result.sg_delta

    holes = [
        HoleSG(
            hole=number,
            sg_total=sum(s.sg_delta for s in hole_shots[number]),
            sg_shots=hole_shots[number],
        )
        for number in sorted(hole_shots)
    ]

    return RoundSG(
        round_id=resolved_round_id,
        played_on=played_on,
        total=sum(s.sg_delta for s in shot_results),
        holes=holes,
        shots=shot_results,
        **category_totals,
    )


def filter_by_time_period(
    items: Iterable[T],
    days: int,
    *,
    today: date | None = None,
    key: Callable[[T], Optional[date]] = lambda item: getattr(item, "played_on"),
) -> List[T]:
    """Keep items dated within the last ``days`` days (inclusive)."""

    cutoff = (today or date.today()) - timedelta(days=days)
    kept: List[T] = []
    for item in items:
        when = key(item)
        if when is not None and when >= cutoff:
            kept.append(item)
    return kept


def summarize_player_sg(
    rounds: Sequence[RoundSG],
    *,
    days: int | None = None,
    today: date | None = None,
) -> PlayerSGSummary:
    """Average each category over ``rounds``, optionally within a time window."""

    selected = (
        filter_by_time_period(rounds, days, today=today)
        if days is not None
        else list(rounds)
    )
    count = len(selected)
    if not count:
        return PlayerSGSummary(rounds_count=0)

    averages = {
        name: sum(getattr(r, name) for r in selected) / count
        for name in (*CATEGORIES, "total")
    }
    return PlayerSGSummary(rounds_count=count, **averages)


__all__ = ["compute_round_sg", "filter_by_time_period", "summarize_player_sg"]
