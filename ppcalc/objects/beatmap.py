from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Optional

from ppcalc.constants.mode import Mode


class HitObjectKind(str, Enum):
    # osu!
    CIRCLE = "circle"
    SLIDER = "slider"
    SPINNER = "spinner"

    # osu!taiko
    HIT = "hit"
    DRUM_ROLL = "drum_roll"
    SWELL = "swell"

    # osu!catch
    FRUIT = "fruit"
    JUICE_STREAM = "juice_stream"
    BANANA_SHOWER = "banana_shower"
    DROPLET = "droplet"
    TINY_DROPLET = "tiny_droplet"

    # osu!mania
    NOTE = "note"
    HOLD_NOTE = "hold_note"

    # nested points of sliders
    SLIDER_HEAD = "slider_head"
    SLIDER_TICK = "slider_tick"
    SLIDER_REPEAT = "slider_repeat"
    SLIDER_TAIL = "slider_tail"


@dataclass(frozen=True)
class HitObject:
    kind: HitObjectKind
    nested: tuple[HitObjectKind, ...] = ()

    def count_nested(self, *kinds: HitObjectKind) -> int:
        return sum(1 for kind in self.nested if kind in kinds)


@dataclass
class Beatmap:
    """A decoded, playable beatmap as handed to us by the beatmap source."""

    hit_objects: list[HitObject] = field(default_factory=list)

    id: Optional[int] = None
    md5: str = ""
    title: str = ""

    def __repr__(self) -> str:
        return f"<{self.title or 'beatmap'} ({self.id})>"

    def count(self, *kinds: HitObjectKind) -> int:
        return sum(1 for hit_object in self.hit_objects if hit_object.kind in kinds)

    def of_kind(self, kind: HitObjectKind) -> list[HitObject]:
        return [hit_object for hit_object in self.hit_objects if hit_object.kind is kind]


@dataclass(frozen=True)
class CatchObjectCounts:
    fruits: int
    droplets: int
    tiny_droplets: int

    @property
    def max_combo(self) -> int:
        return self.fruits + self.droplets


# what a beatmap of each mode is made of, used to validate foreign objects
MODE_KINDS = {
    Mode.STD: frozenset(
        {HitObjectKind.CIRCLE, HitObjectKind.SLIDER, HitObjectKind.SPINNER},
    ),
    Mode.TAIKO: frozenset(
        {HitObjectKind.HIT, HitObjectKind.DRUM_ROLL, HitObjectKind.SWELL},
    ),
    Mode.CATCH: frozenset(
        {
            HitObjectKind.FRUIT,
            HitObjectKind.JUICE_STREAM,
            HitObjectKind.BANANA_SHOWER,
        },
    ),
    Mode.MANIA: frozenset({HitObjectKind.NOTE, HitObjectKind.HOLD_NOTE}),
}
