from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from golfstat.sg.schemas import coerce_distance


class HoleScore(BaseModel):
    hole_number: int = Field(
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    par: int
    score: Optional[int] = None
    fairway_hit: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_hit", "fairwayHit"),
        serialization_alias="fairwayHit",
    )
    green_in_regulation: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("green_in_regulation", "greenInRegulation"),
        serialization_alias="greenInRegulation",
    )
    num_putts: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("num_putts", "numPutts"),
        serialization_alias="numPutts",
    )
    num_penalties: int = Field(
        default=0,
        validation_alias=AliasChoices("num_penalties", "numPenalties"),
        serialization_alias="numPenalties",
    )
    up_and_down: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("up_and_down", "upAndDown"),
        serialization_alias="upAndDown",
    )
    sand_save: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("sand_save", "sandSave"),
        serialization_alias="sandSave",
    )
    strokes_gained: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("strokes_gained", "strokesGained"),
        serialization_alias="strokesGained",
    )

    model_config = ConfigDict(populate_by_name=True)


class RoundStats(BaseModel):
    played_on: Optional[date] = Field(default=None, serialization_alias="date")
    holes_played: int = Field(serialization_alias="holesPlayed")

    total_score: Optional[int] = Field(default=None, serialization_alias="totalScore")
    total_par: Optional[int] = Field(default=None, serialization_alias="totalPar")
    relative_to_par: Optional[int] = Field(
        default=None, serialization_alias="relativeToPar"
    )

    fairways_hit: int = Field(default=0, serialization_alias="fairwaysHit")
    fairways_total: int = Field(default=0, serialization_alias="fairwaysTotal")
    greens_in_regulation: int = Field(
        default=0, serialization_alias="greensInRegulation"
    )

    total_putts: int = Field(default=0, serialization_alias="totalPutts")
    putt_holes: int = Field(default=0, serialization_alias="puttHoles")
    putts_per_hole: Optional[float] = Field(
        default=None, serialization_alias="puttsPerHole"
    )

    up_and_downs: int = Field(default=0, serialization_alias="upAndDowns")
    sand_saves: int = Field(default=0, serialization_alias="sandSaves")
    penalties: int = 0
    strokes_gained: Optional[float] = Field(
        default=None, serialization_alias="strokesGained"
    )

    model_config = ConfigDict(populate_by_name=True)


class PlayerRoundStats(BaseModel):
    rounds_count: int = Field(serialization_alias="roundsCount")
    average_score: Optional[float] = Field(
        default=None, serialization_alias="averageScore"
    )
    fairway_pct: int = Field(default=0, serialization_alias="fairwayPct")
    gir_pct: int = Field(default=0, serialization_alias="girPct")
    putts_per_hole: float = Field(default=0.0, serialization_alias="puttsPerHole")

    model_config = ConfigDict(populate_by_name=True)


class Club(BaseModel):
    id: int
    name: str
    club_type: str = Field(
        default="",
        validation_alias=AliasChoices("club_type", "type"),
        serialization_alias="type",
    )
    distance: Optional[int] = None
    is_in_bag: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_in_bag", "isInBag"),
        serialization_alias="isInBag",
    )

    model_config = ConfigDict(populate_by_name=True)


class ClubShot(BaseModel):
    """The club-related fields of a recorded shot."""

    club_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("club_id", "clubId")
    )
    shot_distance: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("shot_distance", "shotDistance")
    )
    successful_strike: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("successful_strike", "successfulStrike"),
    )
    direction: Optional[str] = None
    outcome: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("shot_distance", mode="before")
    @classmethod
    def _coerce_distance(cls, value: Any) -> Optional[float]:
        return coerce_distance(value)


class ClubDispersion(BaseModel):
    """Share of a club's shots (percent) finishing in each direction."""

    left: float = 0.0
    center: float = 0.0
    right: float = 0.0
    long: float = 0.0
    short: float = 0.0
    target: float = 0.0


class ClubStats(BaseModel):
    club_id: int = Field(serialization_alias="clubId")
    club_name: str = Field(serialization_alias="clubName")
    club_type: str = Field(serialization_alias="clubType")
    total_shots: int = Field(default=0, serialization_alias="totalShots")
    average_distance: float = Field(default=0.0, serialization_alias="averageDistance")
    min_distance: float = Field(default=0.0, serialization_alias="minDistance")
    max_distance: float = Field(default=0.0, serialization_alias="maxDistance")
    accuracy: float = 0.0
    dispersion: ClubDispersion = Field(default_factory=ClubDispersion)
    outcomes: Dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "Club",
    "ClubDispersion",
    "ClubShot",
    "ClubStats",
    "HoleScore",
    "PlayerRoundStats",
    "RoundStats",
]
