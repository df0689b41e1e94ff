"""Telemetry helpers for strokes-gained computation."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, MutableMapping, Optional

from golfstat import config

SGTelemetryEmitter = Callable[[str, Mapping[str, object]], None]

_emitter: Optional[SGTelemetryEmitter] = None
_logger = logging.getLogger("golfstat.telemetry.events")


def set_sg_telemetry_emitter(candidate: SGTelemetryEmitter | None) -> None:
    """Register a telemetry emitter used for strokes-gained instrumentation."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not config.SG_TELEMETRY_ENABLED:
        return
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:
        _logger.exception("failed to emit telemetry event %s", event)


def record_round_sg_computed(
    round_id: str,
    duration_ms: float,
    *,
    shots: int,
    holes: int | None = None,
) -> None:
    payload: Dict[str, object] = {
        "roundId": round_id,
        "durationMs": int(max(0, round(duration_ms))),
        "shots": int(shots),
        "ts": _now_ms(),
    }
    if holes is not None:
        payload["holes"] = int(holes)
    _safe_emit("sg.round.computed", payload)


def record_round_sg_cache_hit(round_id: str) -> None:
    payload: Dict[str, object] = {"roundId": round_id, "ts": _now_ms()}
    _safe_emit("sg.round.cache_hit", payload)


def _now_ms() -> int:
    from time import time

    return int(time() * 1000)


__all__ = [
    "record_round_sg_cache_hit",
    "record_round_sg_computed",
    "set_sg_telemetry_emitter",
]
