"""Shared pytest fixtures for golfstat tests."""

from __future__ import annotations

import time as _real_time
from typing import Callable, Iterator, List, Mapping, Tuple

import pytest

from golfstat.config import reset_settings_cache
from golfstat.services.sg_cache import reset_round_sg_cache
from golfstat.sg.schemas import RoundShot
from golfstat.telemetry import set_sg_telemetry_emitter


@pytest.fixture(autouse=True)
def _fresh_state() -> Iterator[None]:
    reset_settings_cache()
    reset_round_sg_cache()
    yield
    set_sg_telemetry_emitter(None)
    reset_settings_cache()
    reset_round_sg_cache()


@pytest.fixture
def timewarp(monkeypatch: pytest.MonkeyPatch) -> Callable[[float], float]:
    """Advance the cache clock without sleeping."""

    base = _real_time.time()
    offset = {"value": 0.0}

    def now() -> float:
        return base + offset["value"]

    def advance(seconds: float) -> float:
        offset["value"] += seconds
        return now()

    monkeypatch.setattr("golfstat.services.sg_cache.time", now)

    return advance


@pytest.fixture
def telemetry_events() -> List[Tuple[str, Mapping[str, object]]]:
    """Capture emitted telemetry events for the duration of a test."""

    captured: List[Tuple[str, Mapping[str, object]]] = []
    set_sg_telemetry_emitter(lambda event, payload: captured.append((event, payload)))
    return captured


def make_shot(
    hole: int,
    shot: int,
    shot_type: str,
    distance: float | None,
    outcome: str,
    par: int = 4,
) -> RoundShot:
    return RoundShot(
        hole=hole,
        shot=shot,
        shot_type=shot_type,
        distance_to_target=distance,
        outcome=outcome,
        par=par,
    )


@pytest.fixture
def sample_round_shots() -> List[RoundShot]:
    return [
        make_shot(1, 1, "tee", 400, "fairway"),
        make_shot(1, 2, "approach", 150, "green"),
        make_shot(1, 3, "putt", 10, "holed"),
        make_shot(2, 1, "tee", 180, "ob", par=3),
        make_shot(2, 2, "chip", 15, "holed", par=3),
        make_shot(2, 3, "drop", 15, "rough", par=3),
    ]
