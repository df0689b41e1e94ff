from __future__ import annotations

import hashlib
import json
import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from threading import Lock
from time import perf_counter, time
from typing import Dict, Iterable, Optional

from golfstat import config
from golfstat.config import get_settings
from golfstat.sg.engine import compute_round_sg
from golfstat.sg.schemas import RoundSG, RoundShot
from golfstat.telemetry import record_round_sg_cache_hit, record_round_sg_computed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _StoredRound:
    fingerprint: str
    result: RoundSG
    expires_at: float


class RoundSGCache:
    """Latest strokes-gained result per round.

    One entry is kept per round id. An entry is only served while the round's
    fingerprint is unchanged and its TTL has not run out; a stale entry is
    dropped on lookup. The least recently used round is evicted when full.
    """

    def __init__(self, maxsize: int = 256, ttl_seconds: float = 600.0) -> None:
        self._maxsize = max(1, int(maxsize))
        self._ttl = max(1.0, float(ttl_seconds))
        self._rounds: "OrderedDict[str, _StoredRound]" = OrderedDict()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def lookup(self, round_id: str, fingerprint: str) -> Optional[RoundSG]:
        with self._lock:
            stored = self._rounds.get(round_id)
            if stored is not None and (
                stored.expires_at < time() or stored.fingerprint != fingerprint
            ):
                del self._rounds[round_id]
                stored = None
            if stored is None:
                self._misses += 1
                return None
            self._rounds.move_to_end(round_id)
            self._hits += 1
            return stored.result

    def store(self, round_id: str, fingerprint: str, result: RoundSG) -> None:
        with self._lock:
            self._rounds[round_id] = _StoredRound(
                fingerprint=fingerprint, result=result, expires_at=time() + self._ttl
            )
            self._rounds.move_to_end(round_id)
            while len(self._rounds) > self._maxsize:
                evicted, _ = self._rounds.popitem(last=False)
                logger.debug("evicted strokes gained for round %s", evicted)

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "rounds": len(self._rounds),
            }


@lru_cache(maxsize=1)
def get_round_sg_cache() -> RoundSGCache:
    settings = get_settings()
    return RoundSGCache(
        maxsize=settings.sg_cache_maxsize, ttl_seconds=settings.sg_cache_ttl_seconds
    )


def reset_round_sg_cache() -> None:
    get_round_sg_cache.cache_clear()


def compute_shots_fingerprint(
    shots: Iterable[RoundShot], *, played_on: date | None = None
) -> str:
    """Order-independent digest of everything a round result depends on."""

    canonical: list[tuple] = []
    for shot in shots:
        data = shot.model_dump(mode="python")
        canonical.append(
            (
                int(data["hole"]),
                int(data["shot"]),
                data.get("shot_type") or "",
                json.dumps(data.get("distance_to_target")),
                data.get("outcome") or "",
                json.dumps(data.get("par")),
            )
        )

    canonical.sort()
    payload = {
        "playedOn": played_on.isoformat() if played_on else None,
        "shots": canonical,
    }
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    return hashlib.sha1(raw.encode()).hexdigest()


def get_round_sg(round_id: str, fingerprint: str) -> Optional[RoundSG]:
    return get_round_sg_cache().lookup(round_id, fingerprint)


def compute_and_cache_round_sg(
    round_id: str,
    shots: list[RoundShot],
    *,
    played_on: date | None = None,
    fingerprint: str | None = None,
) -> RoundSG:
    cache = get_round_sg_cache()
    resolved_fingerprint = fingerprint or compute_shots_fingerprint(
        shots, played_on=played_on
    )

    cached = cache.lookup(round_id, resolved_fingerprint)
    if cached is not None:
        record_round_sg_cache_hit(round_id)
        return cached

    started = perf_counter()
    result = compute_round_sg(shots, round_id=round_id, played_on=played_on)
    duration_ms = (perf_counter() - started) * 1000.0
    if duration_ms > config.SG_SLOW_COMPUTE_MS:
        logger.warning(
            "strokes gained for round %s took %.1f ms (%d shots)",
            round_id,
            duration_ms,
            len(shots),
        )
    record_round_sg_computed(
        round_id, duration_ms, shots=len(shots), holes=len(result.holes)
    )

    cache.store(round_id, resolved_fingerprint, result)
    return result


__all__ = [
    "RoundSGCache",
    "compute_and_cache_round_sg",
    "compute_shots_fingerprint",
    "get_round_sg",
    "get_round_sg_cache",
    "reset_round_sg_cache",
]
