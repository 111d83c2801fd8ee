from __future__ import annotations

from typing import Optional

from ppcalc.constants.mode import Mode
from ppcalc.errors import InvalidParameter
from ppcalc.objects.beatmap import Beatmap
from ppcalc.objects.beatmap import CatchObjectCounts
from ppcalc.objects.beatmap import HitObjectKind
from ppcalc.objects.beatmap import MODE_KINDS
from ppcalc.objects.statistics import SimulationTarget


def check_mode(beatmap: Beatmap, mode: Mode) -> None:
    allowed = MODE_KINDS[mode]

    for hit_object in beatmap.hit_objects:
        if hit_object.kind not in allowed:
            raise InvalidParameter(
                "ruleset",
                f"{beatmap!r} contains {hit_object.kind.value} objects "
                f"which aren't playable in {mode.short_name}",
            )


def catch_object_counts(beatmap: Beatmap) -> CatchObjectCounts:
    fruits = beatmap.count(HitObjectKind.FRUIT)
    droplets = tiny_droplets = 0

    for stream in beatmap.of_kind(HitObjectKind.JUICE_STREAM):
        fruits += stream.count_nested(HitObjectKind.FRUIT)
        droplets += stream.count_nested(HitObjectKind.DROPLET)
        tiny_droplets += stream.count_nested(HitObjectKind.TINY_DROPLET)

    return CatchObjectCounts(fruits, droplets, tiny_droplets)


def max_combo(beatmap: Beatmap, mode: Mode) -> int:
    check_mode(beatmap, mode)

    if mode is Mode.STD:
        # every nested point after a slider's head is worth one more combo
        return len(beatmap.hit_objects) + sum(
            max(len(slider.nested) - 1, 0)
            for slider in beatmap.of_kind(HitObjectKind.SLIDER)
        )

    if mode is Mode.TAIKO:
        return beatmap.count(HitObjectKind.HIT)

    if mode is Mode.CATCH:
        return catch_object_counts(beatmap).max_combo

    # combo isn't an input to mania performance
    return 0


def countable_objects(beatmap: Beatmap, mode: Mode) -> int:
    """Number of objects the ruleset's accuracy is judged on."""
    check_mode(beatmap, mode)

    if mode is Mode.TAIKO:
        return beatmap.count(HitObjectKind.HIT)

    if mode is Mode.CATCH:
        counts = catch_object_counts(beatmap)
        return counts.max_combo + counts.tiny_droplets

    return len(beatmap.hit_objects)


def resolve_combo(target: SimulationTarget, beatmap_max_combo: int) -> int:
    if target.combo is not None:
        # mania has no max combo to check against
        if beatmap_max_combo and target.combo > beatmap_max_combo:
            raise InvalidParameter(
                "combo",
                f"{target.combo} is above the beatmap's max combo of {beatmap_max_combo}",
            )

        return target.combo

    percent = target.combo_percent if target.combo_percent is not None else 100.0
    return round(percent / 100 * beatmap_max_combo)


def combo_percentage(combo: int, beatmap_max_combo: int) -> Optional[float]:
    if beatmap_max_combo == 0:
        return None

    return round(100.0 * combo / beatmap_max_combo, 2)
