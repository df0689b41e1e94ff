from __future__ import annotations

from datetime import date

import pytest

from golfstat import config
from golfstat.services.sg_cache import (
    RoundSGCache,
    compute_and_cache_round_sg,
    compute_shots_fingerprint,
    get_round_sg,
    get_round_sg_cache,
)
from golfstat.sg.schemas import RoundSG, RoundShot
from golfstat.telemetry import record_round_sg_computed, set_sg_telemetry_emitter
from golfstat.tests.conftest import make_shot


def _round(round_id: str) -> RoundSG:
    return RoundSG(round_id=round_id)


def test_store_evicts_least_recently_used_round() -> None:
    cache = RoundSGCache(maxsize=2, ttl_seconds=60)
    cache.store("r1", "a", _round("r1"))
    cache.store("r2", "b", _round("r2"))

    assert cache.lookup("r1", "a") is not None
    cache.store("r3", "c", _round("r3"))

    assert cache.lookup("r2", "b") is None
    assert cache.lookup("r1", "a") is not None
    assert cache.lookup("r3", "c") is not None
    assert cache.stats() == {"hits": 3, "misses": 1, "rounds": 2}


def test_changed_fingerprint_drops_the_stored_round() -> None:
    cache = RoundSGCache(maxsize=4, ttl_seconds=60)
    cache.store("r1", "old", _round("r1"))

    assert cache.lookup("r1", "new") is None
    assert cache.lookup("r1", "old") is None
    assert cache.stats()["rounds"] == 0


def test_expired_rounds_are_dropped(timewarp) -> None:
    cache = RoundSGCache(maxsize=4, ttl_seconds=5)
    cache.store("r1", "a", _round("r1"))

    timewarp(4)
    assert cache.lookup("r1", "a") is not None

    timewarp(10)
    assert cache.lookup("r1", "a") is None
    assert cache.stats()["rounds"] == 0


def test_cache_bounds_are_clamped() -> None:
    cache = RoundSGCache(maxsize=0, ttl_seconds=0)
    cache.store("r1", "a", _round("r1"))
    cache.store("r2", "b", _round("r2"))

    assert cache.stats()["rounds"] == 1
    assert cache.lookup("r2", "b") is not None


def test_cache_reuses_result_for_same_shots(
    sample_round_shots: list[RoundShot], telemetry_events
) -> None:
    played_on = date(2024, 6, 1)
    first = compute_and_cache_round_sg(
        "round-1", sample_round_shots, played_on=played_on
    )
    second = compute_and_cache_round_sg(
        "round-1", list(reversed(sample_round_shots)), played_on=played_on
    )

    assert second is first
    assert first.round_id == "round-1"
    assert first.played_on == played_on
    assert get_round_sg_cache().stats() == {"hits": 1, "misses": 1, "rounds": 1}

    events = [name for name, _ in telemetry_events]
    assert events == ["sg.round.computed", "sg.round.cache_hit"]
    computed = telemetry_events[0][1]
    assert computed["roundId"] == "round-1"
    assert computed["shots"] == len(sample_round_shots)
    assert computed["holes"] == 2


def test_cache_recomputes_when_round_date_changes(
    sample_round_shots: list[RoundShot],
) -> None:
    first = compute_and_cache_round_sg(
        "round-4", sample_round_shots, played_on=date(2024, 6, 1)
    )
    corrected = compute_and_cache_round_sg(
        "round-4", sample_round_shots, played_on=date(2024, 6, 2)
    )
    undated = compute_and_cache_round_sg("round-4", sample_round_shots)

    assert corrected is not first
    assert corrected.played_on == date(2024, 6, 2)
    assert corrected.total == pytest.approx(first.total)
    assert undated.played_on is None
    assert get_round_sg_cache().stats()["misses"] == 3


def test_cache_recomputes_when_shots_change(
    sample_round_shots: list[RoundShot],
) -> None:
    first = compute_and_cache_round_sg("round-2", sample_round_shots)
    edited = sample_round_shots[:-1] + [make_shot(2, 3, "putt", 4, "holed", par=3)]
    second = compute_and_cache_round_sg("round-2", edited)

    assert second is not first
    assert second.putting == pytest.approx(first.putting + 0.13)

    fingerprint = compute_shots_fingerprint(edited)
    assert get_round_sg("round-2", fingerprint) is second
    stale = compute_shots_fingerprint(sample_round_shots)
    assert get_round_sg("round-2", stale) is None


def test_fingerprint_ignores_order_but_not_labels_or_date() -> None:
    a = [make_shot(1, 1, "tee", 300, "fairway"), make_shot(1, 2, "putt", 8, "holed")]
    b = [make_shot(1, 2, "putt", 8, "holed"), make_shot(1, 1, "tee", 300, "fairway")]
    assert compute_shots_fingerprint(a) == compute_shots_fingerprint(b)

    relabelled = [make_shot(1, 1, "Tee", 300, "fairway"), a[1]]
    assert compute_shots_fingerprint(a) != compute_shots_fingerprint(relabelled)

    c = [make_shot(1, 1, "tee", 301, "fairway"), a[1]]
    assert compute_shots_fingerprint(a) != compute_shots_fingerprint(c)

    dated = compute_shots_fingerprint(a, played_on=date(2024, 6, 1))
    assert dated != compute_shots_fingerprint(a)
    assert dated == compute_shots_fingerprint(b, played_on=date(2024, 6, 1))


def test_cache_size_comes_from_settings(
    monkeypatch: pytest.MonkeyPatch, sample_round_shots: list[RoundShot]
) -> None:
    monkeypatch.setenv("SG_CACHE_MAXSIZE", "1")
    monkeypatch.setenv("SG_CACHE_TTL_SECONDS", "30")

    compute_and_cache_round_sg("a", sample_round_shots)
    compute_and_cache_round_sg("b", sample_round_shots)
    assert get_round_sg_cache().stats()["rounds"] == 1


def test_cache_ttl_comes_from_settings(
    monkeypatch: pytest.MonkeyPatch, sample_round_shots: list[RoundShot], timewarp
) -> None:
    monkeypatch.setenv("SG_CACHE_TTL_SECONDS", "30")

    first = compute_and_cache_round_sg("ttl", sample_round_shots)
    timewarp(31)
    assert compute_and_cache_round_sg("ttl", sample_round_shots) is not first


def test_empty_round_is_cached() -> None:
    result = compute_and_cache_round_sg("empty", [])
    assert result.total == 0.0
    assert compute_and_cache_round_sg("empty", []) is result


def test_emitter_failures_do_not_propagate(
    sample_round_shots: list[RoundShot], caplog: pytest.LogCaptureFixture
) -> None:
    def broken(event, payload):
        raise RuntimeError("sink down")

    set_sg_telemetry_emitter(broken)
    result = compute_and_cache_round_sg("round-3", sample_round_shots)

    assert result.total == pytest.approx(0.56)
    assert "failed to emit telemetry event sg.round.computed" in caplog.text


def test_telemetry_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch, telemetry_events
) -> None:
    monkeypatch.setattr(config, "SG_TELEMETRY_ENABLED", False)
    record_round_sg_computed("r", 1.2, shots=3)
    assert telemetry_events == []


def test_slow_computation_is_logged(
    monkeypatch: pytest.MonkeyPatch,
    sample_round_shots: list[RoundShot],
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(config, "SG_SLOW_COMPUTE_MS", -1.0)
    compute_and_cache_round_sg("slow", sample_round_shots)
    assert "strokes gained for round slow took" in caplog.text
