"""Expected-strokes baseline tables and the floor lookup shared by every lie."""

from __future__ import annotations

from bisect import bisect_right
from typing import Dict, Iterable, Sequence, Tuple, Union

BaselineTable = Tuple[Tuple[float, float], ...]

# Distances are yards for every lie except ``green``, which is keyed by feet.
# Values are expected strokes to hole out and are kept exactly as recorded,
# including the small dips around 120-140 yards on tee/sand/recovery.
BASELINES: Dict[str, BaselineTable] = {
    "tee": (
        (100, 2.92),
        (120, 2.99),
        (140, 2.97),
        (160, 2.99),
        (180, 3.05),
        (200, 3.12),
        (220, 3.17),
        (240, 3.25),
        (260, 3.45),
        (280, 3.65),
        (300, 3.71),
        (320, 3.79),
        (340, 3.86),
        (360, 3.92),
        (380, 3.96),
        (400, 3.99),
        (420, 4.02),
        (440, 4.08),
        (460, 4.17),
        (480, 4.28),
        (500, 4.41),
        (520, 4.54),
        (540, 4.65),
        (560, 4.74),
        (580, 4.79),
        (600, 4.82),
    ),
    "fairway": (
        (20, 2.40),
        (40, 2.60),
        (60, 2.70),
        (80, 2.75),
        (100, 2.80),
        (120, 2.85),
        (140, 2.91),
        (160, 2.98),
        (180, 3.08),
        (200, 3.19),
        (220, 3.32),
        (240, 3.45),
        (260, 3.58),
        (280, 3.69),
        (300, 3.78),
        (320, 3.84),
        (340, 3.88),
        (360, 3.95),
        (380, 4.03),
        (400, 4.11),
        (420, 4.15),
        (440, 4.20),
        (460, 4.29),
        (480, 4.40),
        (500, 4.53),
        (520, 4.66),
        (540, 4.78),
        (560, 4.86),
        (580, 4.91),
        (600, 4.94),
    ),
    "rough": (
        (20, 2.59),
        (40, 2.78),
        (60, 2.91),
        (80, 2.96),
        (100, 3.02),
        (120, 3.08),
        (140, 3.15),
        (160, 3.23),
        (180, 3.31),
        (200, 3.42),
        (220, 3.53),
        (240, 3.64),
        (260, 3.74),
        (280, 3.83),
        (300, 3.90),
        (320, 3.95),
        (340, 4.02),
        (360, 4.11),
        (380, 4.21),
        (400, 4.30),
        (420, 4.34),
        (440, 4.39),
        (460, 4.48),
        (480, 4.59),
        (500, 4.72),
        (520, 4.85),
        (540, 4.97),
        (560, 5.05),
        (580, 5.10),
        (600, 5.13),
    ),
    "sand": (
        (20, 2.53),
        (40, 2.82),
        (60, 3.15),
        (80, 3.24),
        (100, 3.23),
        (120, 3.21),
        (140, 3.22),
        (160, 3.28),
        (180, 3.40),
        (200, 3.55),
        (220, 3.70),
        (240, 3.84),
        (260, 3.93),
        (280, 4.00),
        (300, 4.04),
        (320, 4.12),
        (340, 4.26),
        (360, 4.41),
        (380, 4.55),
        (400, 4.69),
        (420, 4.73),
        (440, 4.78),
        (460, 4.87),
        (480, 4.98),
        (500, 5.11),
        (520, 5.24),
        (540, 5.36),
        (560, 5.44),
        (580, 5.49),
        (600, 5.52),
    ),
    "recovery": (
        (100, 3.80),
        (120, 3.78),
        (140, 3.80),
        (160, 3.81),
        (180, 3.82),
        (200, 3.87),
        (220, 3.92),
        (240, 3.97),
        (260, 4.03),
        (280, 4.10),
        (300, 4.20),
        (320, 4.31),
        (340, 4.44),
        (360, 4.56),
        (380, 4.66),
        (400, 4.75),
        (420, 4.79),
        (440, 4.84),
        (460, 4.93),
        (480, 5.04),
        (500, 5.17),
        (520, 5.30),
        (540, 5.42),
        (560, 5.50),
        (580, 5.55),
        (600, 5.58),
    ),
    "green": (
        (3, 1.04),
        (4, 1.13),
        (5, 1.23),
        (6, 1.34),
        (7, 1.42),
        (8, 1.50),
        (9, 1.56),
        (10, 1.61),
        (15, 1.78),
        (20, 1.87),
        (30, 1.98),
        (40, 2.06),
        (50, 2.14),
        (60, 2.21),
        (90, 2.40),
    ),
}


def _validate_table_points(points: Iterable[Tuple[float, float]]) -> None:
    """Ensure a table is non-empty and its distances strictly increase."""

    last_distance = None
    count = 0
    for distance, _ in points:
        if last_distance is not None and distance <= last_distance:
            raise ValueError("Baseline distances must be strictly increasing")
        last_distance = distance
        count += 1
    if not count:
        raise ValueError("baseline table requires at least one point")


for _name, _points in BASELINES.items():
    _validate_table_points(_points)

# Parallel key arrays so lookups can bisect without rebuilding lists per call.
_KEYS: Dict[str, Tuple[float, ...]] = {
    name: tuple(distance for distance, _ in points)
    for name, points in BASELINES.items()
}


def _floor_lookup(
    keys: Sequence[float], points: Sequence[Tuple[float, float]], distance: float
) -> float:
    idx = bisect_right(keys, distance) - 1
    if idx < 0:
        idx = 0
    return points[idx][1]


def lookup_expected_strokes(
    table: Union[str, Sequence[Tuple[float, float]]], distance: float
) -> float:
    """Return expected strokes for ``distance`` on ``table``.

    ``table`` is either the name of one of :data:`BASELINES` or a sequence of
    ``(distance, strokes)`` pairs sorted by distance. The value belongs to the
    largest tabulated distance not exceeding ``distance``; anything shorter
    than the first key uses the first key. There is no interpolation.
    """

    if isinstance(table, str):
        return _floor_lookup(_KEYS[table], BASELINES[table], distance)

    points = tuple(table)
    _validate_table_points(points)
    keys = tuple(d for d, _ in points)
    return _floor_lookup(keys, points, distance)


__all__ = [
    "BASELINES",
    "BaselineTable",
    "lookup_expected_strokes",
]
