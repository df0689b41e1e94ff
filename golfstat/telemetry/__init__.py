"""Telemetry hooks for strokes-gained services."""

from .events import (  # noqa: F401
    record_round_sg_cache_hit,
    record_round_sg_computed,
    set_sg_telemetry_emitter,
)
