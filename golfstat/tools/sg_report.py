"""Print a strokes-gained breakdown for a round stored as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, TextIO

from golfstat import config
from golfstat.sg.engine import compute_round_sg
from golfstat.sg.schemas import RoundSG, RoundShot

CATEGORY_LABELS = (
    ("off_tee", "Off the Tee"),
    ("approach", "Approach"),
    ("around_green", "Around the Green"),
    ("putting", "Putting"),
)


def load_round(path: Path) -> tuple[Optional[str], Optional[date], list[RoundShot]]:
    """Read shots from ``path``; accepts a bare list or ``{"shots": [...]}``."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    round_id: Optional[str] = None
    played_on: Optional[date] = None
    if isinstance(payload, list):
        raw_shots = payload
    elif isinstance(payload, Mapping):
        raw_shots = payload.get("shots") or []
        raw_id = payload.get("roundId") or payload.get("round_id")
        round_id = str(raw_id) if raw_id is not None else None
        raw_date = payload.get("date")
        if raw_date:
            played_on = date.fromisoformat(str(raw_date))
    else:
        raise ValueError("expected a list of shots or an object with 'shots'")
    if not isinstance(raw_shots, list):
        raise ValueError("'shots' must be a list")
    return round_id, played_on, [RoundShot.model_validate(item) for item in raw_shots]


def format_value(value: float, precision: int) -> str:
    return f"+{value:.{precision}f}" if value > 0 else f"{value:.{precision}f}"


def write_report(handle: TextIO, result: RoundSG, precision: int = 2) -> None:
    title = f"Round {result.round_id}" if result.round_id else "Round"
    if result.played_on:
        title = f"{title} ({result.played_on.isoformat()})"
    handle.write(f"{title}\n\n")

    if not result.holes:
        handle.write("No shots recorded.\n")
        return

    handle.write("| Hole | Shots | SG |\n")
    handle.write("|---|---|---|\n")
    for hole in result.holes:
        handle.write(
            f"| {hole.hole} | {len(hole.sg_shots)} | "
            f"{format_value(hole.sg_total, precision)} |\n"
        )

    handle.write("\n")
    for name, label in CATEGORY_LABELS:
        handle.write(f"{label}: {format_value(getattr(result, name), precision)}\n")
    handle.write(f"Total: {format_value(result.total, precision)}\n")


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="JSON file with the round's shots")
    parser.add_argument(
        "--round-id", type=str, help="Override the round id found in the file"
    )
    parser.add_argument(
        "--json", action="store_true", help="Emit the full result as JSON"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=config.SG_REPORT_PRECISION,
        help="Decimal places in the text report (default: $SG_REPORT_PRECISION or 2)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser, parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, stdout: TextIO | None = None) -> int:
    parser, args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    out = stdout or sys.stdout

    try:
        round_id, played_on, shots = load_round(args.path)
    except (OSError, ValueError) as exc:
        parser.error(f"cannot read {args.path}: {exc}")

    result = compute_round_sg(
        shots, round_id=args.round_id or round_id, played_on=played_on
    )
    if args.json:
        out.write(result.model_dump_json(by_alias=True, indent=2))
        out.write("\n")
    else:
        write_report(out, result, precision=args.precision)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
