from __future__ import annotations

import pytest

from golfstat.rounds.club_stats import compute_club_stats
from golfstat.rounds.models import Club, ClubShot

DRIVER = Club(id=1, name="Driver", club_type="driver")
SEVEN_IRON = Club(id=7, name="7 Iron", club_type="iron")
PUTTER = Club(id=14, name="Putter", club_type="Putter")


def _shot(distance, successful, direction, outcome, club_id=1) -> ClubShot:
    return ClubShot(
        club_id=club_id,
        shot_distance=distance,
        successful_strike=successful,
        direction=direction,
        outcome=outcome,
    )


def test_driver_summary() -> None:
    shots = [
        _shot(250, True, "center", "fairway"),
        _shot(230, False, "left", "rough"),
        _shot(270, True, "center", "fairway"),
        _shot(None, True, "right", "OB"),
    ]

    (stats,) = compute_club_stats(shots, [DRIVER])

    assert stats.club_name == "Driver"
    assert stats.total_shots == 4
    assert stats.average_distance == pytest.approx(250.0)
    assert stats.min_distance == 230
    assert stats.max_distance == 270
    assert stats.accuracy == pytest.approx(75.0)
    assert stats.dispersion.center == pytest.approx(50.0)
    assert stats.dispersion.left == pytest.approx(25.0)
    assert stats.dispersion.right == pytest.approx(25.0)
    assert stats.dispersion.long == 0.0
    assert stats.outcomes == {
        "fairway": pytest.approx(50.0),
        "rough": pytest.approx(25.0),
        "OB": pytest.approx(25.0),
    }


def test_putter_outcomes_are_regrouped() -> None:
    shots = [
        ClubShot(club_id=14, outcome="hole"),
        ClubShot(club_id=14, outcome="green"),
        ClubShot(club_id=14, outcome="lip"),
        ClubShot(club_id=14, outcome="holed"),
    ]

    (stats,) = compute_club_stats(shots, [PUTTER])

    assert stats.outcomes == {
        "holed": pytest.approx(25.0),
        "acceptable": pytest.approx(25.0),
        "bad": pytest.approx(50.0),
    }


def test_clubs_without_shots_and_stray_shots() -> None:
    shots = [
        ClubShot(club_id=None, shot_distance=150),
        ClubShot(club_id=99, shot_distance=150),
        ClubShot(club_id=7, direction="sideways"),
    ]

    driver, iron, putter = compute_club_stats(shots, [DRIVER, SEVEN_IRON, PUTTER])

    assert driver.total_shots == 0
    assert driver.average_distance == 0.0
    assert driver.min_distance == 0.0
    assert driver.outcomes == {}

    assert iron.total_shots == 1
    assert iron.min_distance == 0.0
    assert iron.accuracy == 0.0
    assert iron.dispersion.model_dump() == {
        "left": 0.0,
        "center": 0.0,
        "right": 0.0,
        "long": 0.0,
        "short": 0.0,
        "target": 0.0,
    }

    assert putter.outcomes == {"holed": 0.0, "acceptable": 0.0, "bad": 0.0}


def test_records_accept_camel_case() -> None:
    club = Club.model_validate({"id": 3, "name": "3 Wood", "type": "wood"})
    shot = ClubShot.model_validate(
        {"clubId": 3, "shotDistance": "215", "successfulStrike": True}
    )

    (stats,) = compute_club_stats([shot], [club])

    assert stats.average_distance == pytest.approx(215.0)
    dumped = stats.model_dump(by_alias=True)
    assert dumped["clubType"] == "wood"
    assert dumped["totalShots"] == 1
    assert dumped["accuracy"] == pytest.approx(100.0)


def test_unusable_shot_distance_is_ignored() -> None:
    shots = [
        ClubShot(club_id=1, shot_distance="n/a"),
        ClubShot(club_id=1, shot_distance=0),
        ClubShot(club_id=1, shot_distance=240),
    ]

    (stats,) = compute_club_stats(shots, [DRIVER])

    assert stats.total_shots == 3
    assert stats.average_distance == pytest.approx(240.0)
    assert stats.min_distance == 240
