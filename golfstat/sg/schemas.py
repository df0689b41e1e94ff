"""Pydantic models representing shot observations and strokes-gained results."""

from __future__ import annotations

import math
import numbers
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

SHOT_TYPES = ("tee", "approach", "chip", "bunker", "putt")

CATEGORY_BY_SHOT_TYPE = {
    "tee": "off_tee",
    "approach": "approach",
    "chip": "around_green",
    "bunker": "around_green",
    "putt": "putting",
}
CATEGORIES = ("off_tee", "approach", "around_green", "putting")


def coerce_distance(value: Any) -> Optional[float]:
    """Best-effort float conversion; anything unusable becomes ``None``.

    Any real number (``Decimal``, ``Fraction`` and numpy scalars included) and
    numeric strings are accepted. Values too large for a float are unusable.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (numbers.Real, Decimal)):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


def label_text(value: Any) -> str:
    """Labels are matched verbatim; ``None`` reads as the empty label."""

    if value is None:
        return ""
    return str(value)


class ShotObservation(BaseModel):
    """A single shot as recorded by the round tracker."""

    shot_type: str = Field(
        default="", validation_alias=AliasChoices("shot_type", "shotType")
    )
    distance_to_target: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("distance_to_target", "distanceToTarget"),
    )
    outcome: str = ""
    par: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("shot_type", "outcome", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("distance_to_target", mode="before")
    @classmethod
    def _coerce_distance(cls, value: Any) -> Optional[float]:
        return coerce_distance(value)

    @field_validator("par", mode="before")
    @classmethod
    def _coerce_par(cls, value: Any) -> Optional[int]:
        number = coerce_distance(value)
        if number is None or math.isinf(number):
            return None
        return int(number)


class RoundShot(ShotObservation):
    """Shot observation placed within a round."""

    round_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("round_id", "roundId")
    )
    hole: int = Field(validation_alias=AliasChoices("hole", "holeNumber"))
    shot: int = Field(validation_alias=AliasChoices("shot", "shotNumber"))


class ShotSG(BaseModel):
    """Per-shot strokes-gained value."""

    hole: int
    shot: int
    shot_type: str = Field(default="", serialization_alias="shotType")
    category: Optional[str] = None
    sg_delta: float

    model_config = ConfigDict(populate_by_name=True)


class HoleSG(BaseModel):
    """Aggregated strokes-gained over a hole."""

    hole: int
    sg_total: float = Field(alias="sg")
    sg_shots: List[ShotSG] = Field(alias="shots")

    model_config = ConfigDict(populate_by_name=True)


class RoundSG(BaseModel):
    round_id: str = Field(default="", alias="roundId")
    played_on: Optional[date] = Field(default=None, alias="date")
    off_tee: float = Field(default=0.0, alias="offTee")
    approach: float = 0.0
    around_green: float = Field(default=0.0, alias="aroundGreen")
    putting: float = 0.0
    total: float = 0.0
    holes: List[HoleSG] = Field(default_factory=list)
    shots: List[ShotSG] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class PlayerSGSummary(BaseModel):
    """Average strokes-gained per round across a player's rounds."""

    rounds_count: int = Field(alias="roundsCount")
    off_tee: float = Field(default=0.0, alias="offTee")
    approach: float = 0.0
    around_green: float = Field(default=0.0, alias="aroundGreen")
    putting: float = 0.0
    total: float = 0.0

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "CATEGORIES",
    "CATEGORY_BY_SHOT_TYPE",
    "HoleSG",
    "PlayerSGSummary",
    "RoundSG",
    "RoundShot",
    "SHOT_TYPES",
    "ShotObservation",
    "ShotSG",
    "coerce_distance",
    "label_text",
]
