"""Strokes gained core package."""

from .baselines import BASELINES, lookup_expected_strokes  # noqa: F401
from .engine import (  # noqa: F401
    compute_round_sg,
    filter_by_time_period,
    summarize_player_sg,
)
from .estimator import calculate_strokes_gained, shot_strokes_gained  # noqa: F401
from .schemas import (  # noqa: F401
    HoleSG,
    PlayerSGSummary,
    RoundSG,
    RoundShot,
    ShotObservation,
    ShotSG,
)
