"""Per-shot strokes-gained estimation from baseline lookups.

No post-shot distance is recorded by the round tracker, so the distance left
after a shot is approximated from the starting distance with fixed ratios and
fixed putt lengths.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, Optional

from .baselines import lookup_expected_strokes
from .schemas import ShotObservation, coerce_distance, label_text

logger = logging.getLogger(__name__)

TEE_LEAVE_RATIO = 0.7
TEE_TO_GREEN_PUTT_FT = 20

APPROACH_LEAVE_RATIO = 0.5
APPROACH_PUTT_RATIO = 0.3
APPROACH_PUTT_CAP_FT = 90

SHORT_GAME_MIN_YDS = 20
SHORT_GAME_PUTT_RATIO = 3
SHORT_GAME_PUTT_CAP_FT = 60
SHORT_GAME_MISS = -0.5

GOOD_PUTT_LEAVE_FT = 2
POOR_PUTT_LEAVE_FT = 5

HAZARD_PENALTY = -1.0
OB_PENALTY = -2.0

# Outcome label -> baseline table describing the lie the ball finished in.
_LIE_TABLES: Dict[str, str] = {
    "fairway": "fairway",
    "rough": "rough",
    "bunker": "sand",
    "sand": "sand",
    "recovery": "recovery",
}

ShotHandler = Callable[[float, str], Optional[float]]


def _gained(expected_before: float, expected_after: float) -> float:
    # one stroke spent on the shot itself
    return expected_before - expected_after - 1.0


def _penalty(outcome: str) -> Optional[float]:
    if outcome == "hazard":
        return HAZARD_PENALTY
    if outcome == "ob":
        return OB_PENALTY
    return None


def _tee_shot(distance: float, outcome: str) -> Optional[float]:
    before = lookup_expected_strokes("tee", distance)
    if outcome in ("fairway", "rough", "bunker"):
        after = lookup_expected_strokes(
            _LIE_TABLES[outcome], distance * TEE_LEAVE_RATIO
        )
        return _gained(before, after)
    if outcome == "green":
        after = lookup_expected_strokes("green", TEE_TO_GREEN_PUTT_FT)
        return _gained(before, after)
    return _penalty(outcome)


def _approach_shot(distance: float, outcome: str) -> Optional[float]:
    # The outcome doubles as the lie the approach was played from.
    source = _LIE_TABLES.get(outcome, "fairway")
    before = lookup_expected_strokes(source, distance)
    if outcome == "green":
        putt_ft = min(APPROACH_PUTT_CAP_FT, distance * APPROACH_PUTT_RATIO)
        return _gained(before, lookup_expected_strokes("green", putt_ft))
    if outcome in ("fairway", "rough", "bunker", "sand"):
        after = lookup_expected_strokes(
            _LIE_TABLES[outcome], distance * APPROACH_LEAVE_RATIO
        )
        return _gained(before, after)
    return _penalty(outcome)


def _short_game_shot(source: str, distance: float, outcome: str) -> float:
    before = lookup_expected_strokes(source, max(SHORT_GAME_MIN_YDS, distance))
    if outcome == "green":
        putt_ft = min(distance * SHORT_GAME_PUTT_RATIO, SHORT_GAME_PUTT_CAP_FT)
        return _gained(before, lookup_expected_strokes("green", putt_ft))
    if outcome == "holed":
        return before - 1.0
    return SHORT_GAME_MISS


def _putt(distance: float, outcome: str) -> Optional[float]:
    before = lookup_expected_strokes("green", distance)
    if outcome == "holed":
        return before - 1.0
    if outcome == "good":
        return _gained(before, lookup_expected_strokes("green", GOOD_PUTT_LEAVE_FT))
    if outcome == "poor":
        return _gained(before, lookup_expected_strokes("green", POOR_PUTT_LEAVE_FT))
    return None


_HANDLERS: Dict[str, ShotHandler] = {
    "tee": _tee_shot,
    "approach": _approach_shot,
    "chip": partial(_short_game_shot, "recovery"),
    "bunker": partial(_short_game_shot, "sand"),
    "putt": _putt,
}


def calculate_strokes_gained(
    shot_type: Any,
    distance_to_target: Any,
    outcome: Any,
    par: Any = None,
) -> float:
    """Return strokes gained (positive) or lost (negative) for one shot.

    ``distance_to_target`` is yards for full swings and feet for putts. ``par``
    is accepted for call compatibility and does not affect the value. Inputs
    that cannot be scored (missing distance, unknown shot type or an outcome
    the shot type does not handle) yield ``0.0`` instead of raising.
    """

    distance = coerce_distance(distance_to_target)
    if not distance:
        return 0.0

    kind = label_text(shot_type)
    handler = _HANDLERS.get(kind)
    if handler is None:
        logger.debug("unscored shot type %r; strokes gained set to 0", shot_type)
        return 0.0

    value = handler(distance, label_text(outcome))
    if value is None:
        logger.debug(
            "unscored outcome %r for %s shot; strokes gained set to 0", outcome, kind
        )
        return 0.0
    return float(value)


def shot_strokes_gained(observation: ShotObservation) -> float:
    """Convenience wrapper over :func:`calculate_strokes_gained`."""

    return calculate_strokes_gained(
        observation.shot_type,
        observation.distance_to_target,
        observation.outcome,
        observation.par,
    )


__all__ = ["calculate_strokes_gained", "shot_strokes_gained"]
