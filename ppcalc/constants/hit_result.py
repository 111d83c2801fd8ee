from __future__ import annotations

from enum import Enum


class HitResult(str, Enum):
    PERFECT = "perfect"
    GREAT = "great"
    GOOD = "good"
    OK = "ok"
    MEH = "meh"
    MISS = "miss"

    # osu!catch droplets
    LARGE_TICK_HIT = "large_tick_hit"
    SMALL_TICK_HIT = "small_tick_hit"
    SMALL_TICK_MISS = "small_tick_miss"

    def __repr__(self) -> str:
        return self.value
